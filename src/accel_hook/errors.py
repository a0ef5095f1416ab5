"""Error type shared by every hook stage."""

from __future__ import annotations


class HookError(Exception):
    """Fatal hook failure carrying the process exit code.

    Raised for malformed input, missing resources and failed handoffs alike;
    the command line reports it once and exits with ``exit_code``.
    """

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
