# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Allow ``python -m copyright_header``."""

from copyright_header.cli.main import cli

if __name__ == "__main__":
    cli()
