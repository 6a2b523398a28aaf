# topmark:header:start
#
#   project      : IncludeTidy
#   file         : exit_codes.py
#   file_relpath : src/includetidy/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the IncludeTidy CLI.

IncludeTidy aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `WOULD_CHANGE=2`,
which signals a dry-run where include directives would be rewritten. Tests must assert
`result.exception is None` to disambiguate this from Click's own usage errors (also 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the IncludeTidy CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Dry-run: changes would be made if ``--apply`` were set.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding/encoding error. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNEXPECTED_ERROR: Unhandled/unknown error. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring
    USAGE_ERROR = 64
    ENCODING_ERROR = 65
    FILE_NOT_FOUND = 66
    UNEXPECTED_ERROR = 70
    IO_ERROR = 74
    PERMISSION_DENIED = 77
    CONFIG_ERROR = 78
