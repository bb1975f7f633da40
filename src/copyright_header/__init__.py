# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Copyright Header package.

Copyright Header inserts, updates and removes copyright/license header comments
across source trees. It detects existing headers per comment syntax, merges their
years and holders with the requested values, and rewrites files so that only the
header region changes. The `copyright-header` command drives the
processing pipeline; its components are plain, typed functions and classes.
"""

from __future__ import annotations
