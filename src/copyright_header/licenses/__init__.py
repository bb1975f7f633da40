# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Bundled license templates (``<NAME>.txt``), read with `importlib.resources`."""
