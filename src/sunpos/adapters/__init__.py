# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for sun path export.

External dependencies (csv, json, file I/O) are confined to this layer.
"""
from sunpos.adapters.csv_exporter import CsvSunPathExporter
from sunpos.adapters.json_exporter import JsonSunPathExporter

__all__ = ["CsvSunPathExporter", "JsonSunPathExporter"]
