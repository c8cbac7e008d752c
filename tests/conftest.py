import pytest

from dockdash.model import (
    ContainerInfo,
    ImageInfo,
    MountInfo,
    NetworkInfo,
    PortInfo,
    ResourceSnapshot,
    VolumeInfo,
)


@pytest.fixture
def snapshot():
    """A small but complete snapshot with every category populated."""
    return ResourceSnapshot(
        containers=(
            ContainerInfo(
                id="4f66ad9a0b2e5c1d7e8f9a0b1c2d3e4f",
                names=("/web",),
                image="nginx:latest",
                command="/docker-entrypoint.sh nginx -g 'daemon off;'",
                state="running",
                status="Up 2 hours",
                ports=(PortInfo(private_port=80, type="tcp", public_port=8080, ip="0.0.0.0"),),
                mounts=(MountInfo(source="/srv/www", destination="/usr/share/nginx/html"),),
                networks=("bridge",),
            ),
            ContainerInfo(
                id="9b8c7d6e5f4a3b2c1d0e",
                names=("/db",),
                image="postgres:16",
                command="docker-entrypoint.sh postgres",
                state="exited",
                status="Exited (0) 3 days ago",
            ),
        ),
        images=(
            ImageInfo(
                id="sha256:aaaaaaaaaaaaaaaaaaaaaaaa",
                repo_tags=("nginx:latest", "nginx:1.27"),
                repo_digests=("nginx@sha256:1234",),
                size=104857600,
                containers=1,
            ),
            ImageInfo(id="sha256:bbbbbbbbbbbbbbbbbbbb", size=1572864, containers=-1),
        ),
        volumes=(
            VolumeInfo(
                name="pgdata",
                driver="local",
                mountpoint="/var/lib/docker/volumes/pgdata/_data",
                labels={"com.docker.compose.project": "shop"},
                created_at="2024-05-01T10:00:00Z",
            ),
        ),
        networks=(
            NetworkInfo(id="f1e2d3c4b5a6978877665544", name="bridge", driver="bridge", scope="local"),
            NetworkInfo(
                id="0123456789abcdef0123",
                name="overlay-net",
                driver="overlay",
                scope="swarm",
                attachable=True,
                ingress=True,
            ),
        ),
    )
