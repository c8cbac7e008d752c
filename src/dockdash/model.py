"""
Data models for the Docker resources shown by dockdash.

This module defines immutable dataclasses (frozen=True) built from the raw
summaries returned by the Docker Engine API, plus the snapshot that bundles
one complete fetch:

Data Classes:
  - PortInfo / MountInfo: container port bindings and mounts
  - ContainerInfo: container summary (id, names, image, command, state, ...)
  - ImageInfo: image summary (tags, digests, size, dependent containers)
  - VolumeInfo: volume summary (driver, mountpoint, labels, options)
  - NetworkInfo: network summary (driver, scope, boolean flags)
  - ResourceSnapshot: the four collections of one fetch, or its error

Key Fields:
  - API nulls are normalized to empty tuples/dicts by the from_api builders
  - ResourceSnapshot is never mutated; each fetch produces a new one
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

CATEGORY_NAMES = ("containers", "images", "volumes", "networks")


class FetchFailure(Exception):
    """A snapshot fetch failed; `cause` holds the underlying error."""

    def __init__(self, cause: BaseException):
        super().__init__(str(cause) or cause.__class__.__name__)
        self.cause = cause


@dataclass(frozen=True)
class PortInfo:
    private_port: int
    type: str = "tcp"
    public_port: int = 0
    ip: str = ""

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "PortInfo":
        return cls(
            private_port=raw.get("PrivatePort") or 0,
            type=raw.get("Type") or "tcp",
            public_port=raw.get("PublicPort") or 0,
            ip=raw.get("IP") or "",
        )


@dataclass(frozen=True)
class MountInfo:
    source: str
    destination: str

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "MountInfo":
        return cls(source=raw.get("Source") or "", destination=raw.get("Destination") or "")


@dataclass(frozen=True)
class ContainerInfo:
    id: str
    names: Tuple[str, ...] = ()
    image: str = ""
    command: str = ""
    state: str = ""
    status: str = ""
    ports: Tuple[PortInfo, ...] = ()
    mounts: Tuple[MountInfo, ...] = ()
    networks: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        if not self.names:
            return ""
        first = self.names[0]
        return first[1:] if first.startswith("/") else first

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "ContainerInfo":
        settings = raw.get("NetworkSettings") or {}
        return cls(
            id=raw.get("Id") or "",
            names=tuple(raw.get("Names") or ()),
            image=raw.get("Image") or "",
            command=raw.get("Command") or "",
            state=raw.get("State") or "",
            status=raw.get("Status") or "",
            ports=tuple(PortInfo.from_api(p) for p in raw.get("Ports") or ()),
            mounts=tuple(MountInfo.from_api(m) for m in raw.get("Mounts") or ()),
            networks=tuple((settings.get("Networks") or {}).keys()),
        )


@dataclass(frozen=True)
class ImageInfo:
    id: str
    repo_tags: Tuple[str, ...] = ()
    repo_digests: Tuple[str, ...] = ()
    size: int = 0
    containers: int = 0

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "ImageInfo":
        return cls(
            id=raw.get("Id") or "",
            repo_tags=tuple(raw.get("RepoTags") or ()),
            repo_digests=tuple(raw.get("RepoDigests") or ()),
            size=raw.get("Size") or 0,
            containers=raw.get("Containers") or 0,
        )


@dataclass(frozen=True)
class VolumeInfo:
    name: str
    driver: str = ""
    mountpoint: str = ""
    labels: Dict[str, str] = field(default_factory=dict)
    options: Dict[str, str] = field(default_factory=dict)
    created_at: str = ""

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "VolumeInfo":
        return cls(
            name=raw.get("Name") or "",
            driver=raw.get("Driver") or "",
            mountpoint=raw.get("Mountpoint") or "",
            labels=dict(raw.get("Labels") or {}),
            options=dict(raw.get("Options") or {}),
            created_at=raw.get("CreatedAt") or "",
        )


@dataclass(frozen=True)
class NetworkInfo:
    id: str
    name: str = ""
    driver: str = ""
    scope: str = ""
    internal: bool = False
    attachable: bool = False
    ingress: bool = False
    enable_ipv6: bool = False

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "NetworkInfo":
        return cls(
            id=raw.get("Id") or "",
            name=raw.get("Name") or "",
            driver=raw.get("Driver") or "",
            scope=raw.get("Scope") or "",
            internal=bool(raw.get("Internal")),
            attachable=bool(raw.get("Attachable")),
            ingress=bool(raw.get("Ingress")),
            enable_ipv6=bool(raw.get("EnableIPv6")),
        )


@dataclass(frozen=True)
class ResourceSnapshot:
    containers: Tuple[ContainerInfo, ...] = ()
    images: Tuple[ImageInfo, ...] = ()
    volumes: Tuple[VolumeInfo, ...] = ()
    networks: Tuple[NetworkInfo, ...] = ()
    load_error: Optional[FetchFailure] = None

    @classmethod
    def failed(cls, error: FetchFailure) -> "ResourceSnapshot":
        return cls(load_error=error)

    @property
    def ok(self) -> bool:
        return self.load_error is None

    def collection(self, category: str) -> tuple:
        if category not in CATEGORY_NAMES:
            raise KeyError(category)
        return getattr(self, category)
