# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Configuration layer: TOML loading, layered merging and the frozen runtime `Config`."""

from __future__ import annotations
