"""Error codes for CLI exit status.

These map to shell exit codes and are used consistently by the CLI to
report the kind of failure that occurred.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the changefeed command.

    These values are used as process exit codes and should remain stable:
    - 0: Success (including "no modules found", which only warns)
    - 1: User error (wrong arguments, changelog not found)
    - 2: Config error (invalid config file)
    - 3: I/O error (unreadable changelog, output not writable)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    IO_ERROR = 3

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        """Check if this code indicates success."""
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        """Check if this code indicates an error."""
        return self != ErrorCode.OK
