"""Unit tests for DockerComposeInspector.

Tests for the Docker Compose mount inspector implementation.
"""

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, call, patch

import pytest
from dapmapper.inspectors.docker import DockerComposeInspector
from dapmapper.models.mapping import PathMapping
from dapmapper.models.mount import BindMount
from dapmapper.utils.shell import CommandResult

PS_ARGS = ["docker", "compose", "ps", "-a", "--format", "{{ .ID }}"]


def _ok(stdout: str) -> CommandResult:
    """Successful command result."""
    return CommandResult(stdout=stdout, stderr="", returncode=0)


def _inspect_args(container_id: str) -> list[str]:
    """Expected docker inspect arguments for a container."""
    return ["docker", "inspect", container_id, "--format", "{{ json .Mounts }}"]


class TestDockerComposeInspector:
    """Tests for DockerComposeInspector class."""

    @pytest.fixture
    def inspector(self) -> DockerComposeInspector:
        """Create DockerComposeInspector instance."""
        return DockerComposeInspector()

    def test_name_is_docker(self, inspector: DockerComposeInspector) -> None:
        """Inspector reports docker as its runtime."""
        assert inspector.name == "docker"

    def test_is_available_with_docker(self, inspector: DockerComposeInspector) -> None:
        """is_available returns True when docker command exists."""
        with patch("dapmapper.inspectors.docker.command_exists") as mock_exists:
            mock_exists.return_value = True
            assert inspector.is_available() is True
            mock_exists.assert_called_once_with("docker")

    def test_is_available_custom_command(self) -> None:
        """is_available checks the configured executable."""
        inspector = DockerComposeInspector(docker_command="podman")

        with patch("dapmapper.inspectors.docker.command_exists", return_value=False) as mock:
            assert inspector.is_available() is False
            mock.assert_called_once_with("podman")

    def test_bind_mounts_only(
        self, inspector: DockerComposeInspector, mock_inspect_output: str
    ) -> None:
        """Volumes are filtered out, bind mounts are kept."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [_ok("abc123\n"), _ok(mock_inspect_output)]

            mounts = inspector.list_bind_mounts("/srv/project/main.py")

        assert mounts == [
            BindMount(
                source="/host/src",
                destination="/app/src",
                mode="rw",
                read_write=True,
                propagation="rprivate",
            )
        ]

    def test_end_to_end_mappings(
        self, inspector: DockerComposeInspector, mock_inspect_output: str
    ) -> None:
        """list_mappings derives mappings from the bind mounts."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [_ok("abc123\n"), _ok(mock_inspect_output)]

            mappings = inspector.list_mappings("/srv/project/main.py")

        assert [m.to_dict() for m in mappings] == [
            {"localRoot": "/host/src", "remoteRoot": "/app/src"}
        ]

    def test_runs_in_normalized_directory(
        self, inspector: DockerComposeInspector, mock_inspect_output: str
    ) -> None:
        """Docker commands run from the directory containing the target."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [_ok("abc123"), _ok(mock_inspect_output)]

            inspector.list_bind_mounts("/srv/project/main.py")

        assert mock_run.call_args_list == [
            call(PS_ARGS, timeout=10.0, cwd="/srv/project"),
            call(_inspect_args("abc123"), timeout=10.0, cwd="/srv/project"),
        ]

    def test_preserves_container_then_mount_order(
        self,
        inspector: DockerComposeInspector,
        mock_compose_ps_output: str,
        mock_inspect_output: str,
        mock_second_inspect_output: str,
    ) -> None:
        """Mounts are returned in container order, then mount order."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [
                _ok(mock_compose_ps_output),
                _ok(mock_inspect_output),
                _ok(mock_second_inspect_output),
            ]

            mounts = inspector.list_bind_mounts("/srv/project/")
            # Both containers mount onto /app/src; the first one wins
            mock_run.side_effect = [
                _ok(mock_compose_ps_output),
                _ok(mock_inspect_output),
                _ok(mock_second_inspect_output),
            ]
            mappings = inspector.list_mappings("/srv/project/")

        assert [(m.source, m.destination) for m in mounts] == [
            ("/host/src", "/app/src"),
            ("/other/src", "/app/src"),
            ("/host/config", "/etc/app"),
        ]
        assert mappings == [
            PathMapping(local_root="/host/src", remote_root="/app/src"),
            PathMapping(local_root="/host/config", remote_root="/etc/app"),
        ]

    def test_compose_ps_failure_yields_nothing(self, inspector: DockerComposeInspector) -> None:
        """A failing docker compose ps means no mounts."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="", stderr="no configuration file provided", returncode=1
            )

            mounts = inspector.list_bind_mounts("/srv/project/main.py")

        assert mounts == []
        mock_run.assert_called_once()

    def test_no_containers_yields_nothing(
        self, inspector: DockerComposeInspector, mock_empty_output: str
    ) -> None:
        """Blank compose ps output means no containers and no inspect calls."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.return_value = _ok(mock_empty_output + "\n  \n")

            mounts = inspector.list_bind_mounts("/srv/project/main.py")

        assert mounts == []
        mock_run.assert_called_once()

    @pytest.mark.parametrize(
        "error",
        [
            FileNotFoundError("docker not found"),
            PermissionError("permission denied"),
            subprocess.TimeoutExpired(cmd=PS_ARGS, timeout=10.0),
        ],
    )
    def test_docker_unusable_yields_nothing(
        self, inspector: DockerComposeInspector, error: Exception
    ) -> None:
        """Missing docker, OS errors and timeouts are not raised."""
        with patch("dapmapper.inspectors.docker.run_command", side_effect=error):
            assert inspector.list_bind_mounts("/srv/project/main.py") == []

    def test_failed_inspect_skips_container(
        self, inspector: DockerComposeInspector, mock_inspect_output: str
    ) -> None:
        """A container whose inspect fails does not block the others."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [
                _ok("gone\nabc123\n"),
                CommandResult(stdout="", stderr="No such object: gone", returncode=1),
                _ok(mock_inspect_output),
            ]

            mounts = inspector.list_bind_mounts("/srv/project/")

        assert [m.destination for m in mounts] == ["/app/src"]

    def test_malformed_json_skips_container(
        self, inspector: DockerComposeInspector, mock_inspect_output: str
    ) -> None:
        """Malformed inspect output is skipped, later containers still count."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [
                _ok("bad\nabc123\n"),
                _ok("[{not json"),
                _ok(mock_inspect_output),
            ]

            mounts = inspector.list_bind_mounts("/srv/project/")

        assert [m.destination for m in mounts] == ["/app/src"]

    def test_inspect_timeout_skips_container(
        self, inspector: DockerComposeInspector, mock_inspect_output: str
    ) -> None:
        """A hanging inspect call is skipped after the timeout."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [
                _ok("slow\nabc123\n"),
                subprocess.TimeoutExpired(cmd=_inspect_args("slow"), timeout=10.0),
                _ok(mock_inspect_output),
            ]

            mounts = inspector.list_bind_mounts("/srv/project/")

        assert [m.destination for m in mounts] == ["/app/src"]

    @pytest.mark.parametrize("stdout", ["null\n", "[]\n", '{"Type": "bind"}', '"text"'])
    def test_non_list_or_empty_mounts(
        self, inspector: DockerComposeInspector, stdout: str
    ) -> None:
        """null, empty and non-array mount documents contribute nothing."""
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [_ok("abc123"), _ok(stdout)]

            assert inspector.list_bind_mounts("/srv/project/") == []

    def test_skips_malformed_records(self, inspector: DockerComposeInspector) -> None:
        """Non-object records and bind records without paths are skipped."""
        stdout = (
            '["oops", {"Type": "bind", "Source": "", "Destination": "/x"},'
            ' {"Type": "bind", "Source": "/ok", "Destination": "/app"}]'
        )
        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [_ok("abc123"), _ok(stdout)]

            mounts = inspector.list_bind_mounts("/srv/project/")

        assert [(m.source, m.destination) for m in mounts] == [("/ok", "/app")]

    def test_custom_command_and_timeout(self, mock_inspect_output: str) -> None:
        """Configured executable and timeout are used for every call."""
        inspector = DockerComposeInspector(docker_command="/usr/local/bin/docker", timeout=3.0)

        with patch("dapmapper.inspectors.docker.run_command") as mock_run:
            mock_run.side_effect = [_ok("abc123"), _ok(mock_inspect_output)]

            inspector.list_bind_mounts("/srv/project/")

        for recorded in mock_run.call_args_list:
            assert recorded.args[0][0] == "/usr/local/bin/docker"
            assert recorded.kwargs["timeout"] == 3.0

    def test_each_call_attempted_once(self, inspector: DockerComposeInspector) -> None:
        """Failures are not retried."""
        mock_run = MagicMock(
            side_effect=[
                _ok("abc123"),
                CommandResult(stdout="", stderr="daemon unreachable", returncode=1),
            ]
        )
        with patch("dapmapper.inspectors.docker.run_command", mock_run):
            inspector.list_bind_mounts("/srv/project/")

        assert mock_run.call_count == 2


@pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script")
class TestDockerComposeInspectorProcess:
    """Tests running DockerComposeInspector against a fake docker executable."""

    @staticmethod
    def _fake_docker(tmp_path: Path, body: str) -> str:
        """Write an executable shell script standing in for docker."""
        script = tmp_path / "docker"
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(0o755)
        return str(script)

    def test_undecodable_stderr_yields_nothing(self, tmp_path: Path) -> None:
        """A failing compose ps with non-UTF-8 stderr is not raised."""
        docker = self._fake_docker(tmp_path, "printf 'bad \\377\\376 byte' >&2\nexit 1")
        inspector = DockerComposeInspector(docker_command=docker)

        assert inspector.list_bind_mounts(str(tmp_path)) == []

    def test_undecodable_inspect_output_skips_container(self, tmp_path: Path) -> None:
        """Non-UTF-8 inspect output is treated as malformed JSON."""
        docker = self._fake_docker(
            tmp_path,
            'if [ "$1" = compose ]; then echo abc123; exit 0; fi\n'
            "printf '[\\377\\376]'",
        )
        inspector = DockerComposeInspector(docker_command=docker)

        assert inspector.list_bind_mounts(str(tmp_path)) == []

    def test_reads_mounts_from_process(self, tmp_path: Path) -> None:
        """Output of a real process flows through to BindMounts."""
        mounts_json = '[{"Type": "bind", "Source": "/host/src", "Destination": "/app/src"}]'
        docker = self._fake_docker(
            tmp_path,
            'if [ "$1" = compose ]; then echo abc123; exit 0; fi\n'
            f"echo '{mounts_json}'",
        )
        inspector = DockerComposeInspector(docker_command=docker)

        mounts = inspector.list_bind_mounts(str(tmp_path))

        assert [(m.source, m.destination) for m in mounts] == [("/host/src", "/app/src")]
