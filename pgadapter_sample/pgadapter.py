"""
Embedded PGAdapter.

PGAdapter is a proxy that translates the PostgreSQL wire protocol to Cloud
Spanner. The application starts it in a Docker container on a port chosen by
Docker, waits until it accepts connections and publishes the assigned address
so the database URL derived from the settings points at the running proxy.

Usage::

    with PGAdapter() as pgadapter:
        engine = create_engine(settings.database.url)
"""

from __future__ import annotations

import atexit
import os
from pathlib import Path
from typing import List, Optional

import psycopg
from testcontainers.core.container import DockerContainer
from testcontainers.core.waiting_utils import wait_container_is_ready

from pgadapter_sample.core.config import Settings, settings
from pgadapter_sample.core.logging_config import get_logger
from pgadapter_sample.errors import PGAdapterStartupError

logger = get_logger(__name__)

PGADAPTER_CONTAINER_PORT = 5432
CONTAINER_CREDENTIALS_PATH = "/credentials.json"


class PGAdapter:
    """Lifecycle manager for a PGAdapter container.

    The proxy is started when the object is created (or entered as a context
    manager) and released by ``stop()``, which is also registered to run at
    interpreter exit.
    """

    def __init__(self, config: Settings = settings, start: bool = True) -> None:
        self.config = config
        self._container: Optional[DockerContainer] = None
        self._host: Optional[str] = None
        self._port: int = 0
        if start:
            self.start()

    @property
    def host(self) -> Optional[str]:
        return self._host

    @property
    def port(self) -> int:
        """Host port PGAdapter listens on; ``0`` while it is not running."""
        return self._port

    @property
    def image(self) -> str:
        pgadapter = self.config.pgadapter
        return pgadapter.emulator_image if pgadapter.use_bundled_emulator else pgadapter.image

    def command(self) -> List[str]:
        """Command line arguments for the PGAdapter container."""
        if self.config.pgadapter.use_bundled_emulator:
            # The bundled image configures PGAdapter for its own emulator.
            return []
        spanner = self.config.spanner
        args = ["-p", spanner.project, "-i", spanner.instance, "-d", spanner.database, "-x"]
        if spanner.emulator_host:
            args += ["-r", "autoConfigEmulator=true"]
        elif spanner.credentials:
            args += ["-c", CONTAINER_CREDENTIALS_PATH]
        return args

    def _build_container(self) -> DockerContainer:
        spanner = self.config.spanner
        container = DockerContainer(self.image).with_exposed_ports(PGADAPTER_CONTAINER_PORT)
        command = self.command()
        if command:
            container = container.with_command(command)
        if spanner.emulator_host and not self.config.pgadapter.use_bundled_emulator:
            container = container.with_env("SPANNER_EMULATOR_HOST", spanner.emulator_host)
        elif spanner.credentials and not self.config.pgadapter.use_bundled_emulator:
            container = container.with_volume_mapping(
                str(Path(spanner.credentials).resolve()), CONTAINER_CREDENTIALS_PATH, mode="ro"
            )
        return container

    @wait_container_is_ready(psycopg.OperationalError)
    def _wait_until_ready(self) -> None:
        with psycopg.connect(
            host=self._host,
            port=self._port,
            dbname=self.config.spanner.database,
            connect_timeout=5,
        ) as conn:
            conn.execute("select 1")

    def start(self) -> PGAdapter:
        """Start PGAdapter and publish its address.

        Raises:
            PGAdapterStartupError: If the container does not start or never accepts connections
        """
        if self._container is not None:
            return self
        image = self.image
        logger.info(f"Starting PGAdapter from image {image}")
        self._container = self._build_container()
        try:
            self._container.start()
            self._host = self._container.get_container_host_ip()
            self._port = int(self._container.get_exposed_port(PGADAPTER_CONTAINER_PORT))
            self._wait_until_ready()
        except Exception as e:
            logger.error(f"PGAdapter failed to start: {e}")
            try:
                self.stop()
            except Exception as cleanup_error:
                logger.warning(f"Could not remove the PGAdapter container: {cleanup_error}")
            raise PGAdapterStartupError(image, str(e)) from e

        self._publish()
        atexit.register(self.stop)
        logger.info(f"PGAdapter is listening on {self._host}:{self._port}")
        return self

    def _publish(self) -> None:
        os.environ["PGADAPTER_HOST"] = self._host
        os.environ["PGADAPTER_PORT"] = str(self._port)
        self.config.pgadapter_host = self._host
        self.config.pgadapter_port = self._port

    def stop(self) -> None:
        """Stop PGAdapter and remove its container. Safe to call more than once."""
        container, self._container = self._container, None
        if container is None:
            return
        atexit.unregister(self.stop)
        logger.info("Stopping PGAdapter")
        try:
            container.stop()
        finally:
            self._host = None
            self._port = 0

    def __enter__(self) -> PGAdapter:
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
