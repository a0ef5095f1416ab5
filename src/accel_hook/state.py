"""Hook state decoding from the runtime's stdin."""

from __future__ import annotations

import json
import logging
from typing import TextIO

from accel_hook.errors import HookError
from accel_hook.models import HookState

logger = logging.getLogger(__name__)


def decode_hook_state(raw: str) -> HookState:
    """Decode the first JSON document in raw into a HookState.

    Anything after the first complete document is ignored, the runtime
    writes the state exactly once.
    """
    try:
        data, _ = json.JSONDecoder().raw_decode(raw.lstrip())
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return HookState.from_dict(data)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError too
        raise HookError(f"could not decode container state: {exc}") from exc


def read_hook_state(stream: TextIO) -> HookState:
    """Read the hook state from stream, stopping after the first document.

    Input is consumed line by line until a complete JSON object decodes, so
    the hook does not wait for EOF when the runtime keeps stdin open.
    """
    raw = ""
    try:
        for line in iter(stream.readline, ""):
            raw += line
            try:
                data, _ = json.JSONDecoder().raw_decode(raw.lstrip())
            except ValueError:
                continue
            if isinstance(data, dict):
                break
    except (OSError, ValueError) as exc:
        raise HookError(f"could not decode container state: {exc}") from exc

    state = decode_hook_state(raw)
    logger.debug("Hook state: id=%s status=%s pid=%d", state.id, state.status, state.pid)
    return state
