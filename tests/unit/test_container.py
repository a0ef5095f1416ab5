"""Tests for accel_hook.container — container config assembly."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from accel_hook.container import assemble, get_container_config
from accel_hook.errors import HookError
from accel_hook.models import (
    AcceleratorConfig,
    ContainerConfig,
    HookState,
    Process,
    Root,
    RuntimeSpec,
)


def test_assemble_combines_state_and_spec() -> None:
    state = HookState(oci_version="1.0.2", id="abc", status="created", bundle="/b", pid=77)
    spec = RuntimeSpec(
        root=Root(path="/b/rootfs"),
        process=Process(env=("ACCELERATOR_DEVICES=gpu0", "ACCELERATOR_FUNCTIONS=fft")),
    )

    config = assemble(state, spec)

    assert config == ContainerConfig(
        pid=77,
        rootfs="/b/rootfs",
        env={"ACCELERATOR_DEVICES": "gpu0", "ACCELERATOR_FUNCTIONS": "fft"},
        accelerators=AcceleratorConfig(devices="gpu0", functions="fft"),
    )


def test_assemble_without_accelerator() -> None:
    state = HookState(oci_version="1.0.2", id="abc", status="created", bundle="/b", pid=1)
    spec = RuntimeSpec(root=Root(path="rootfs"), process=Process(env=("PATH=/bin",)))

    config = assemble(state, spec)

    assert config.accelerators is None
    assert config.env == {"PATH": "/bin"}


def test_get_container_config_reads_bundle(
    make_bundle: Callable[..., Path], hook_input: Callable[..., str]
) -> None:
    bundle = make_bundle(env=["ACCELERATOR_DEVICES=gpu0"], rootfs="rootfs")

    config = get_container_config(io.StringIO(hook_input(bundle, pid=321)))

    assert config.pid == 321
    assert config.rootfs == "rootfs"
    assert config.accelerators == AcceleratorConfig(devices="gpu0")


def test_get_container_config_malformed_env(
    make_bundle: Callable[..., Path], hook_input: Callable[..., str]
) -> None:
    bundle = make_bundle(env=["MALFORMED"])

    with pytest.raises(HookError, match="Process environment map error"):
        get_container_config(io.StringIO(hook_input(bundle)))


def test_get_container_config_bad_state() -> None:
    with pytest.raises(HookError, match="could not decode container state"):
        get_container_config(io.StringIO("not json"))
