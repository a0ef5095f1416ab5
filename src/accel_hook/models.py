"""Data models for hook state, OCI runtime spec and container configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _expect(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    """Return data[key] checked against kind; missing or null yields default."""
    value = data.get(key)
    if value is None:
        return default
    # bool is an int subclass but never a valid pid
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field {key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class HookState:
    """Container state the runtime writes to the hook's stdin."""

    oci_version: str
    id: str
    status: str
    bundle: str
    pid: int = 0
    annotations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HookState:
        annotations = _expect(data, "annotations", dict, {})
        for key, value in annotations.items():
            if value is not None and not isinstance(value, str):
                raise ValueError(f"annotation {key!r} must be str, got {type(value).__name__}")
        return cls(
            oci_version=_expect(data, "ociVersion", str, ""),
            id=_expect(data, "id", str, ""),
            status=_expect(data, "status", str, ""),
            bundle=_expect(data, "bundle", str, ""),
            pid=_expect(data, "pid", int, 0),
            # null annotation values decode as empty strings
            annotations={k: v or "" for k, v in annotations.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "ociVersion": self.oci_version,
            "id": self.id,
            "status": self.status,
            "bundle": self.bundle,
        }
        if self.pid:
            d["pid"] = self.pid
        if self.annotations:
            d["annotations"] = dict(self.annotations)
        return d


@dataclass(frozen=True, slots=True)
class Root:
    """Container root filesystem on the host."""

    path: str = ""


@dataclass(frozen=True, slots=True)
class Process:
    """Container process, reduced to its declared environment."""

    env: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RuntimeSpec:
    """The parts of an OCI bundle's config.json the hook acts on.

    ``root`` and ``process`` stay None when the document omits them; the
    loader rejects such specs.
    """

    root: Root | None
    process: Process | None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RuntimeSpec:
        root = None
        root_data = _expect(data, "root", dict, None)
        if root_data is not None:
            root = Root(path=_expect(root_data, "path", str, ""))

        process = None
        process_data = _expect(data, "process", dict, None)
        if process_data is not None:
            env = _expect(process_data, "env", list, [])
            for entry in env:
                if not isinstance(entry, str):
                    raise ValueError(f"process env entry must be str, got {type(entry).__name__}")
            process = Process(env=tuple(env))

        return cls(root=root, process=process)


@dataclass(frozen=True, slots=True)
class AcceleratorConfig:
    """Accelerator request declared in the container environment."""

    devices: str
    functions: str = ""


@dataclass(frozen=True, slots=True)
class ContainerConfig:
    """Everything the dispatcher needs to know about the starting container."""

    pid: int
    rootfs: str
    env: dict[str, str]
    accelerators: AcceleratorConfig | None = None
