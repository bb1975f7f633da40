# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Presentation helpers shared by the pipeline and the CLI."""

from __future__ import annotations
