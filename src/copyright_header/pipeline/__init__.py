# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""File-tree processing: per-file add/remove, write sinks and traversal."""

from __future__ import annotations
