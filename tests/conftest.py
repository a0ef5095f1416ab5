"""Shared test fixtures for accel-hook tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture(autouse=True)
def _isolate_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Any:
    """Keep the hook from writing to /var/log and drop its handlers afterwards."""
    monkeypatch.setenv("ACCEL_HOOK_LOG_FILE", str(tmp_path / "hook.log"))
    monkeypatch.delenv("ACCEL_HOOK_DEBUG", raising=False)
    monkeypatch.delenv("ACCEL_HOOK_TOOL", raising=False)
    yield
    logger = logging.getLogger("accel_hook")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def log_file(tmp_path: Path) -> Path:
    """Path the hook logs to during a test."""
    return tmp_path / "hook.log"


@pytest.fixture()
def make_bundle(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing <tmp>/bundle/config.json.

    With no ``spec`` or ``raw`` text, writes a minimal OCI spec using the
    given process environment and root path.
    """

    def _make(
        env: list[str] | None = None,
        rootfs: str = "rootfs",
        spec: dict[str, Any] | None = None,
        raw: str | None = None,
    ) -> Path:
        bundle = tmp_path / "bundle"
        bundle.mkdir(exist_ok=True)
        if spec is None:
            spec = {
                "ociVersion": "1.0.2",
                "root": {"path": rootfs},
                "process": {
                    "args": ["sh"],
                    "env": env if env is not None else ["PATH=/usr/bin:/bin"],
                },
            }
        text = raw if raw is not None else json.dumps(spec)
        (bundle / "config.json").write_text(text, encoding="utf-8")
        return bundle

    return _make


@pytest.fixture()
def hook_input() -> Callable[..., str]:
    """Factory for the hook state document the runtime writes on stdin."""

    def _state(bundle: Path | str, pid: int = 4242, **extra: Any) -> str:
        state: dict[str, Any] = {
            "ociVersion": "1.0.2",
            "id": "c0ffee",
            "status": "created",
            "pid": pid,
            "bundle": str(bundle),
        }
        state.update(extra)
        return json.dumps(state)

    return _state
