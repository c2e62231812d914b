# topmark:header:start
#
#   project      : Showcase
#   file         : exit_codes.py
#   file_relpath : src/showcase/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Showcase CLI.

Showcase follows the BSD `sysexits` convention so that CI jobs and editors
can tell a malformed document from an invalid one, and both from a missing
file, without parsing output.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Showcase CLI.

    Attributes:
        SUCCESS: The document loaded (and, for `check`, passed) cleanly.
        FAILURE: Generic failure, e.g. a required panel is missing.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        PARSE_ERROR: The document is not well-formed TOML. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The document path does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: The document could not be read. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions to read the document.
            Mirrors BSD ``EX_NOPERM (77)``.
        VALIDATION_ERROR: The document violates the content schema. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    VALIDATION_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
