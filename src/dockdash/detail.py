"""
Detail panel text for the selected item of the focused list.

The resolver never trusts the row itself: it re-locates the full record in
the current snapshot by the same key the row was built from, so the panel
always shows authoritative data (all ports, all tags...). A miss means the
row outlived its snapshot and degrades to the "No <noun> selected." hint.
"""

from typing import TYPE_CHECKING, Optional, Sequence

from .formatting import format_size_mb, join_kv, join_or_dash, short_id, shorten_id, trim_to
from .model import ContainerInfo, ImageInfo, NetworkInfo, PortInfo, ResourceSnapshot, VolumeInfo
from .widgets import NONE_TAG, Row

if TYPE_CHECKING:
    from .categories import Category


def format_port(port: PortInfo) -> str:
    entry = f"{port.private_port}/{port.type}"
    if port.public_port:
        entry = f"{port.public_port}->{port.private_port}/{port.type}"
    if port.ip:
        entry = f"{port.ip}:{entry}"
    return entry


def describe_container(c: ContainerInfo) -> str:
    ports = join_or_dash(format_port(p) for p in c.ports)
    mounts = join_or_dash(f"{trim_to(m.source, 30)}:{m.destination}" for m in c.mounts)
    networks = join_or_dash(c.networks)
    return "\n".join([
        f"Name: {c.name}",
        f"ID: {short_id(c.id)}",
        f"Image: {c.image}",
        f"Command: {c.command}",
        f"State: {c.state}",
        f"Status: {c.status}",
        f"Ports: {ports}",
        f"Mounts: {mounts}",
        f"Networks: {networks}",
    ])


def describe_image(i: ImageInfo) -> str:
    tags = ", ".join(i.repo_tags) if i.repo_tags else NONE_TAG
    return "\n".join([
        f"RepoTags: {tags}",
        f"ID: {shorten_id(i.id)}",
        f"Size: {format_size_mb(i.size)}",
        f"RepoDigests: {join_or_dash(i.repo_digests)}",
        f"Containers: {i.containers:d}",
    ])


def describe_volume(v: VolumeInfo) -> str:
    return "\n".join([
        f"Name: {v.name}",
        f"Driver: {v.driver}",
        f"Mountpoint: {trim_to(v.mountpoint, 60)}",
        f"Labels: {join_kv(v.labels)}",
        f"Options: {join_kv(v.options)}",
        f"Created: {v.created_at or '-'}",
    ])


def _flag(value: bool) -> str:
    return "true" if value else "false"


def describe_network(n: NetworkInfo) -> str:
    return "\n".join([
        f"Name: {n.name}",
        f"ID: {shorten_id(n.id)}",
        f"Driver: {n.driver}",
        f"Scope: {n.scope}",
        f"Internal: {_flag(n.internal)}",
        f"Attachable: {_flag(n.attachable)}",
        f"Ingress: {_flag(n.ingress)}",
        f"EnableIPv6: {_flag(n.enable_ipv6)}",
    ])


class DetailResolver:
    def __init__(self, categories: Sequence["Category"]):
        self._categories = {c.name: c for c in categories}

    def placeholder(self, category: str) -> str:
        return f"No {self._categories[category].noun} selected."

    def resolve(self, category: str, snapshot: Optional[ResourceSnapshot], selected_row: Optional[Row]) -> str:
        spec = self._categories[category]
        if snapshot is None or not selected_row:
            return self.placeholder(category)
        records = snapshot.collection(category)
        if not records or len(selected_row) <= spec.key_index:
            return self.placeholder(category)
        key = selected_row[spec.key_index]
        for record in records:
            if spec.record_key(record) == key:
                return spec.describe(record)
        return self.placeholder(category)
