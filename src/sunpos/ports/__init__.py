# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for exporting sampled sun paths.

Adapters implement these to handle different file formats.
"""
from sunpos.ports.export import SunPathExporter

__all__ = ["SunPathExporter"]
