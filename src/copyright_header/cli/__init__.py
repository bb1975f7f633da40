# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Command-line interface for Copyright Header (Click)."""

from __future__ import annotations
