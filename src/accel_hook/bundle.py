"""OCI bundle loading."""

from __future__ import annotations

import json
from pathlib import Path

from accel_hook.config import SPEC_FILENAME
from accel_hook.errors import HookError
from accel_hook.models import RuntimeSpec


def spec_path(bundle: str) -> Path:
    """Return the path of the runtime spec inside a bundle directory."""
    return Path(bundle) / SPEC_FILENAME


def load_spec(path: Path) -> RuntimeSpec:
    """Load and validate the OCI runtime spec at path.

    Raises:
        HookError: if the file cannot be read or decoded, or if it lacks
            a ``process`` or ``root`` section.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise HookError(f"could not open OCI spec: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise HookError(f"could not decode OCI spec: {exc}") from exc

    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        spec = RuntimeSpec.from_dict(data)
    except ValueError as exc:
        raise HookError(f"could not decode OCI spec: {exc}") from exc

    if spec.process is None:
        raise HookError("Process is empty in OCI spec")
    if spec.root is None:
        raise HookError("Root is empty in OCI spec")
    return spec
