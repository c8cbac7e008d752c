"""Registry of the four resource categories, in focus order."""

from dataclasses import dataclass
from typing import Callable, Tuple

from .detail import describe_container, describe_image, describe_network, describe_volume
from .formatting import short_id, shorten_id
from .widgets import (
    CONTAINER_COLUMNS,
    IMAGE_COLUMNS,
    NETWORK_COLUMNS,
    VOLUME_COLUMNS,
    Column,
    Row,
    container_row,
    image_row,
    network_row,
    volume_row,
)


@dataclass(frozen=True)
class Category:
    name: str
    noun: str
    list_title: str
    info_title: str
    columns: Tuple[Column, ...]
    build_row: Callable[[object], Row]
    key_index: int  # row cell holding the lookup key
    record_key: Callable[[object], str]
    describe: Callable[[object], str]


CATEGORIES: Tuple[Category, ...] = (
    Category(
        name="containers",
        noun="container",
        list_title="Docker Containers",
        info_title="Container Info",
        columns=CONTAINER_COLUMNS,
        build_row=container_row,
        key_index=0,
        record_key=lambda c: short_id(c.id),
        describe=describe_container,
    ),
    Category(
        name="images",
        noun="image",
        list_title="Docker Images",
        info_title="Image Info",
        columns=IMAGE_COLUMNS,
        build_row=image_row,
        key_index=1,
        record_key=lambda i: shorten_id(i.id),
        describe=describe_image,
    ),
    Category(
        name="volumes",
        noun="volume",
        list_title="Docker Volumes",
        info_title="Volume Info",
        columns=VOLUME_COLUMNS,
        build_row=volume_row,
        key_index=0,
        record_key=lambda v: v.name,
        describe=describe_volume,
    ),
    Category(
        name="networks",
        noun="network",
        list_title="Docker Networks",
        info_title="Network Info",
        columns=NETWORK_COLUMNS,
        build_row=network_row,
        key_index=1,
        record_key=lambda n: shorten_id(n.id),
        describe=describe_network,
    ),
)
