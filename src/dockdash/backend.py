"""
Docker API wrapper that loads one complete resource snapshot.

This module talks to the Docker Engine through the docker-py low-level
client (`client.api`), whose list endpoints return the same summaries the
dashboard displays (ports, mounts, repo digests, dependent container
counts...).

Key Classes:
  - DockerBackend: lazily connected docker.DockerClient wrapper

Error Handling:
  - fetch_snapshot() is all-or-nothing: any failure while connecting or
    during one of the four list calls yields an error-only snapshot
  - Failures are logged with traceback; nothing is raised to the UI
  - A failed connection is retried on the next fetch (manual refresh)
  - Fetches are serialized on one lock, so overlapping refreshes never
    share or close the client under each other

Dependencies:
  - docker>=7.0.0 (docker-py client)
"""

import functools
import logging
import threading
from typing import Any, Callable, List

import docker

from .model import (
    ContainerInfo,
    FetchFailure,
    ImageInfo,
    NetworkInfo,
    ResourceSnapshot,
    VolumeInfo,
)

logger = logging.getLogger(__name__)


def docker_safe(on_error: Callable[[Exception], Any]) -> Callable:
    """
    Decorator for Docker API methods that converts failures into a value.

    Catches exceptions, logs them, and returns `on_error(exc)` so the event
    loop always receives a result instead of a crash.

    Usage:
        @docker_safe(on_error=lambda e: ResourceSnapshot.failed(FetchFailure(e)))
        def fetch_snapshot(self) -> ResourceSnapshot:
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Docker operation failed in {func.__name__}: {e}", exc_info=True)
                return on_error(e)
        return wrapper
    return decorator


def _failed_snapshot(error: Exception) -> ResourceSnapshot:
    return ResourceSnapshot.failed(FetchFailure(error))


class DockerBackend:
    def __init__(self):
        self.client = None
        self._lock = threading.Lock()

    def _connect(self) -> "docker.DockerClient":
        if self.client is None:
            self.client = docker.from_env()
            logger.info("Connected to Docker daemon")
        return self.client

    def _drop_client(self) -> None:
        client, self.client = self.client, None
        if client is not None:
            try:
                client.close()
            except Exception as e:
                logger.debug(f"Ignoring error while closing Docker client: {e}")

    def get_containers(self) -> List[ContainerInfo]:
        raw = self._connect().api.containers(all=True)
        return [ContainerInfo.from_api(c) for c in raw or []]

    def get_images(self) -> List[ImageInfo]:
        raw = self._connect().api.images()
        return [ImageInfo.from_api(i) for i in raw or []]

    def get_volumes(self) -> List[VolumeInfo]:
        resp = self._connect().api.volumes() or {}
        # The daemon may report null entries; they carry nothing to display.
        return [VolumeInfo.from_api(v) for v in resp.get("Volumes") or [] if v]

    def get_networks(self) -> List[NetworkInfo]:
        raw = self._connect().api.networks()
        return [NetworkInfo.from_api(n) for n in raw or []]

    @docker_safe(on_error=_failed_snapshot)
    def _fetch(self) -> ResourceSnapshot:
        containers = self.get_containers()
        images = self.get_images()
        volumes = self.get_volumes()
        networks = self.get_networks()
        logger.debug(
            f"Fetched {len(containers)} containers, {len(images)} images, "
            f"{len(volumes)} volumes, {len(networks)} networks"
        )
        return ResourceSnapshot(
            containers=tuple(containers),
            images=tuple(images),
            volumes=tuple(volumes),
            networks=tuple(networks),
        )

    def fetch_snapshot(self) -> ResourceSnapshot:
        """Load all four collections, or an error-only snapshot on any failure."""
        with self._lock:
            snapshot = self._fetch()
            if not snapshot.ok:
                self._drop_client()
        return snapshot
