"""Container environment parsing and accelerator request resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from accel_hook.config import DISABLED_DEVICES, ENV_ACCEL_DEVICES, ENV_ACCEL_FUNCTIONS
from accel_hook.errors import HookError
from accel_hook.models import AcceleratorConfig

logger = logging.getLogger(__name__)


def env_map(entries: Iterable[str]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` entries into a dict; later duplicates win.

    Raises:
        HookError: on an entry with no ``=``.
    """
    env: dict[str, str] = {}
    for entry in entries:
        key, sep, value = entry.partition("=")
        if not sep:
            raise HookError(f"Process environment map error: malformed entry {entry!r}")
        env[key] = value
    return env


def resolve_accelerators(env: Mapping[str, str]) -> AcceleratorConfig | None:
    """Return the requested accelerator config, or None if none is requested."""
    devices = env.get(ENV_ACCEL_DEVICES, "")
    if not devices or devices in DISABLED_DEVICES:
        return None
    functions = env.get(ENV_ACCEL_FUNCTIONS, "")
    logger.info(
        "%s = %s, %s = %s", ENV_ACCEL_DEVICES, devices, ENV_ACCEL_FUNCTIONS, functions
    )
    return AcceleratorConfig(devices=devices, functions=functions)
