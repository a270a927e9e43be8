# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for sun path export.

Adapters implement this to write sampled solar positions in various
formats (CSV, JSON, etc.).
"""
from typing import Protocol, runtime_checkable

from sunpos.domain.observer import Observer
from sunpos.domain.solar_position import SunSample


@runtime_checkable
class SunPathExporter(Protocol):
    """Port for exporting sampled solar positions to file."""

    def export(
        self,
        observer: Observer,
        samples: list[SunSample],
        path: str,
    ) -> int:
        """
        Export solar positions to a file.

        Args:
            observer: Observer the samples were computed for.
            samples: Samples in time order.
            path: Output file path.

        Returns:
            Number of samples exported.
        """
        ...
