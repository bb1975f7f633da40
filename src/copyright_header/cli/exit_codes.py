# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Exit codes for the Copyright Header CLI.

Values follow the BSD `sysexits` convention where one applies.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes.

    Attributes:
        SUCCESS: Every file was processed (added, replaced, removed, unchanged or skipped).
        FAILURE: At least one file ended in ``error``.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Missing, ambiguous or invalid configuration, including
            license templates. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
