"""Hook constants and runtime settings."""

from __future__ import annotations

from dataclasses import dataclass

ACCELERATOR_TOOL = "accelerator-container-runtime-tool"
LOG_FILE = "/var/log/accelerator-runtime-hook.log"

ENV_ACCEL_DEVICES = "ACCELERATOR_DEVICES"
ENV_ACCEL_FUNCTIONS = "ACCELERATOR_FUNCTIONS"

# ACCELERATOR_DEVICES values meaning "explicitly no accelerator"
DISABLED_DEVICES = frozenset({"void", "none"})

SPEC_FILENAME = "config.json"

# syslog severities understood by the configuration tool
LOGLEVEL_INFO = 6
LOGLEVEL_DEBUG = 7


@dataclass(frozen=True, slots=True)
class HookSettings:
    """Settings resolved from the command line for one invocation."""

    debug: bool = False
    log_file: str = LOG_FILE
    tool: str = ACCELERATOR_TOOL

    @property
    def tool_loglevel(self) -> int:
        return LOGLEVEL_DEBUG if self.debug else LOGLEVEL_INFO
