"""Unit tests for the embedded PGAdapter lifecycle.

Docker is replaced by a mock container; the readiness probe is patched out.
"""

from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest

from pgadapter_sample.core.config import Settings
from pgadapter_sample.errors import PGAdapterStartupError
from pgadapter_sample.pgadapter import CONTAINER_CREDENTIALS_PATH, PGAdapter


@pytest.fixture(autouse=True)
def _published_env(monkeypatch: pytest.MonkeyPatch):
    # Registers the variables with monkeypatch so they are restored afterwards.
    monkeypatch.setenv("PGADAPTER_HOST", "localhost")
    monkeypatch.setenv("PGADAPTER_PORT", "5432")


@pytest.fixture
def mock_container():
    container = MagicMock()
    for builder in ("with_exposed_ports", "with_command", "with_env", "with_volume_mapping"):
        getattr(container, builder).return_value = container
    container.get_container_host_ip.return_value = "localhost"
    container.get_exposed_port.return_value = "54321"
    return container


@pytest.fixture
def docker(mock_container):
    with patch("pgadapter_sample.pgadapter.DockerContainer", return_value=mock_container) as docker_container, patch(
        "pgadapter_sample.pgadapter.atexit"
    ) as mock_atexit, patch.object(PGAdapter, "_wait_until_ready") as wait:
        yield MagicMock(container_class=docker_container, atexit=mock_atexit, wait=wait)


def make_settings(**kwargs) -> Settings:
    values = {
        "spanner_project": "test-project",
        "spanner_instance": "test-instance",
        "spanner_database": "test-database",
        "spanner_emulator_host": None,
        "google_application_credentials": None,
        "pgadapter_use_bundled_emulator": False,
    }
    values.update(kwargs)
    return Settings(_env_file=None, **values)


class TestPGAdapterStart:
    def test_publishes_assigned_port(self, docker, mock_container):
        config = make_settings()

        pgadapter = PGAdapter(config)

        assert pgadapter.port == 54321
        assert pgadapter.host == "localhost"
        assert os.environ["PGADAPTER_PORT"] == "54321"
        assert os.environ["PGADAPTER_HOST"] == "localhost"
        assert config.pgadapter.port == 54321
        assert config.database.url == "postgresql+psycopg://localhost:54321/test-database"
        mock_container.with_exposed_ports.assert_called_once_with(5432)
        docker.wait.assert_called_once()
        docker.atexit.register.assert_called_once_with(pgadapter.stop)

    def test_real_spanner_arguments(self, docker, mock_container):
        PGAdapter(make_settings())

        docker.container_class.assert_called_once_with("gcr.io/cloud-spanner-pg-adapter/pgadapter")
        mock_container.with_command.assert_called_once_with(
            ["-p", "test-project", "-i", "test-instance", "-d", "test-database", "-x"]
        )
        mock_container.with_env.assert_not_called()
        mock_container.with_volume_mapping.assert_not_called()

    def test_mounts_credentials(self, docker, mock_container, tmp_path):
        credentials = tmp_path / "key.json"
        credentials.write_text("{}")

        PGAdapter(make_settings(google_application_credentials=str(credentials)))

        command = mock_container.with_command.call_args.args[0]
        assert command[-2:] == ["-c", CONTAINER_CREDENTIALS_PATH]
        mock_container.with_volume_mapping.assert_called_once_with(
            str(credentials.resolve()), CONTAINER_CREDENTIALS_PATH, mode="ro"
        )

    def test_emulator_auto_configuration(self, docker, mock_container):
        PGAdapter(make_settings(spanner_emulator_host="localhost:9010"))

        command = mock_container.with_command.call_args.args[0]
        assert command[-2:] == ["-r", "autoConfigEmulator=true"]
        mock_container.with_env.assert_called_once_with("SPANNER_EMULATOR_HOST", "localhost:9010")

    def test_bundled_emulator_image(self, docker, mock_container):
        PGAdapter(make_settings(pgadapter_use_bundled_emulator=True))

        docker.container_class.assert_called_once_with("gcr.io/cloud-spanner-pg-adapter/pgadapter-emulator")
        mock_container.with_command.assert_not_called()

    def test_start_is_lazy_when_requested(self, docker):
        pgadapter = PGAdapter(make_settings(), start=False)

        assert pgadapter.port == 0
        docker.container_class.assert_not_called()


class TestPGAdapterStop:
    def test_stop_can_be_called_repeatedly(self, docker, mock_container):
        pgadapter = PGAdapter(make_settings())

        pgadapter.stop()
        pgadapter.stop()

        mock_container.stop.assert_called_once()
        docker.atexit.unregister.assert_called_once_with(pgadapter.stop)
        assert pgadapter.port == 0
        assert pgadapter.host is None

    def test_context_manager_stops(self, docker, mock_container):
        with PGAdapter(make_settings()) as pgadapter:
            assert pgadapter.port == 54321

        mock_container.stop.assert_called_once()
        mock_container.start.assert_called_once()


class TestPGAdapterStartupFailure:
    def test_container_start_failure(self, docker, mock_container):
        mock_container.start.side_effect = RuntimeError("image not found")

        with pytest.raises(PGAdapterStartupError, match="image not found") as exc_info:
            PGAdapter(make_settings())

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        mock_container.stop.assert_called_once()
        docker.atexit.register.assert_not_called()

    def test_readiness_timeout(self, docker, mock_container):
        docker.wait.side_effect = TimeoutError("Wait time (120s) exceeded")

        with pytest.raises(PGAdapterStartupError) as exc_info:
            PGAdapter(make_settings())

        assert exc_info.value.image == "gcr.io/cloud-spanner-pg-adapter/pgadapter"
        mock_container.stop.assert_called_once()
        assert os.environ["PGADAPTER_PORT"] == "5432"

    def test_cleanup_failure_keeps_startup_error(self, docker, mock_container):
        docker.wait.side_effect = TimeoutError("Wait time (120s) exceeded")
        mock_container.stop.side_effect = RuntimeError("container already removed")

        with pytest.raises(PGAdapterStartupError, match="Wait time") as exc_info:
            PGAdapter(make_settings())

        assert isinstance(exc_info.value.__cause__, TimeoutError)
        mock_container.stop.assert_called_once()
