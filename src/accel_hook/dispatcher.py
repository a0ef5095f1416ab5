"""Hand accelerator containers over to the configuration tool."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Mapping

from accel_hook.config import HookSettings
from accel_hook.errors import HookError
from accel_hook.models import ContainerConfig

logger = logging.getLogger(__name__)


def rootfs_path(config: ContainerConfig) -> str:
    """Return the container rootfs as an absolute path, symlinks left as-is."""
    try:
        return os.path.abspath(config.rootfs)
    except OSError as exc:
        raise HookError(f"rootfs invalid: {exc}") from exc


def find_tool(name: str) -> str:
    """Locate the configuration tool on PATH."""
    path = shutil.which(name)
    if path is None:
        raise HookError(f"exec failed: {name} not found")
    return path


def build_tool_args(
    tool_path: str, config: ContainerConfig, settings: HookSettings
) -> list[str]:
    """Build the configuration tool's argv.

    The option order is fixed; the tool relies on it.
    """
    if config.accelerators is None:
        raise ValueError("container has no accelerator configuration")

    args = [tool_path, f"--devices={config.accelerators.devices}"]
    if config.accelerators.functions:
        args.append(f"--functions={config.accelerators.functions}")
    args.append(f"--pid={config.pid}")
    args.append(f"--rootfs={rootfs_path(config)}")
    args.append(f"--log={settings.log_file}")
    args.append(f"--loglevel={settings.tool_loglevel}")
    args.append("configure")
    return args


def handoff(args: list[str], env: Mapping[str, str]) -> None:
    """Replace the current process image with args[0].

    Returns only if the exec itself failed, by raising HookError.
    """
    try:
        os.execve(args[0], args, env)
    except OSError as exc:
        raise HookError(f"exec failed: {exc}") from exc


def dispatch(config: ContainerConfig, settings: HookSettings) -> None:
    """Run the configuration tool for accelerator containers, else do nothing."""
    if config.accelerators is None:
        logger.debug("No accelerator requested, nothing to do")
        return

    args = build_tool_args(find_tool(settings.tool), config, settings)
    logger.info("exec command: %s", args)
    handoff(args, os.environ)
