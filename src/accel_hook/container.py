"""Assemble the container configuration from hook state and bundle spec."""

from __future__ import annotations

import logging
from typing import TextIO

from accel_hook.bundle import load_spec, spec_path
from accel_hook.environment import env_map, resolve_accelerators
from accel_hook.models import ContainerConfig, HookState, RuntimeSpec
from accel_hook.state import read_hook_state

logger = logging.getLogger(__name__)


def assemble(state: HookState, spec: RuntimeSpec) -> ContainerConfig:
    """Combine the hook state and a loaded spec into a ContainerConfig."""
    # load_spec rejects specs without root or process
    env = env_map(spec.process.env)
    return ContainerConfig(
        pid=state.pid,
        rootfs=spec.root.path,
        env=env,
        accelerators=resolve_accelerators(env),
    )


def get_container_config(stream: TextIO) -> ContainerConfig:
    """Read the hook state from stream and build the container config."""
    state = read_hook_state(stream)
    logger.info("Container Bundle [%s]", state.bundle)
    spec = load_spec(spec_path(state.bundle))
    return assemble(state, spec)
