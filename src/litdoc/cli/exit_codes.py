# topmark:header:start
#
#   project      : LitDoc
#   file         : exit_codes.py
#   file_relpath : src/litdoc/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the LitDoc CLI application.

Usage:
    ```python
    import subprocess
    from litdoc.cli.exit_codes import ExitCode

    result = subprocess.run(["litdoc", "convert", "src/"])
    if result.returncode == ExitCode.UNSUPPORTED_FILE_TYPE:
        print("Pass --language to pick a converter.")
    ```
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for LitDoc CLI.

    Attributes:
        SUCCESS (int): The command completed without errors.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid flags or arguments (same as Click's usage errors).
        CONFIG_ERROR (int): Missing, unreadable or invalid configuration.
        FILE_NOT_FOUND (int): An input path does not exist.
        IO_ERROR (int): Reading or writing a file failed.
        ENCODING_ERROR (int): An input file is not valid UTF-8.
        UNSUPPORTED_FILE_TYPE (int): No converter handles an input file.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 4
    IO_ERROR = 5
    ENCODING_ERROR = 6
    UNSUPPORTED_FILE_TYPE = 7
