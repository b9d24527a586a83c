"""Docker Compose mount inspector implementation.

Finds the containers of the compose project rooted at a directory with
``docker compose ps`` and reads their mounts with ``docker inspect``.
"""

import json
import logging
import os
import subprocess
from typing import Any

from dapmapper.core.paths import normalize_to_dir
from dapmapper.inspectors.base import MountInspector
from dapmapper.models.mount import BIND_MOUNT_TYPE, BindMount
from dapmapper.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

DEFAULT_DOCKER_COMMAND = "docker"
DEFAULT_TIMEOUT_SECONDS = 10.0


class DockerComposeInspector(MountInspector):
    """Inspector for containers managed by Docker Compose.

    Each docker call is attempted once. A failing or missing docker CLI
    means "no mounts"; a container whose inspection fails is skipped so
    the remaining containers still contribute.
    """

    def __init__(
        self,
        docker_command: str = DEFAULT_DOCKER_COMMAND,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._docker = docker_command
        self._timeout = timeout

    @property
    def name(self) -> str:
        """Return 'docker' as the runtime name."""
        return "docker"

    def is_available(self) -> bool:
        """Check if the docker CLI is available."""
        return command_exists(self._docker)

    def list_bind_mounts(self, path: str | os.PathLike[str]) -> list[BindMount]:
        """List bind mounts of the compose containers for a path.

        Args:
            path: File or directory inside a compose project.

        Returns:
            Bind mounts in container order, then mount order within a container.
        """
        cwd = normalize_to_dir(path)
        mounts: list[BindMount] = []

        for container_id in self.list_container_ids(cwd):
            mounts.extend(self.inspect_bind_mounts(container_id, cwd=cwd))

        logger.debug("Found %d bind mount(s) for %s", len(mounts), cwd)
        return mounts

    def list_container_ids(self, cwd: str) -> list[str]:
        """List IDs of all containers in the compose project at cwd.

        Args:
            cwd: Directory the compose project is resolved from.

        Returns:
            Container IDs, empty if docker fails or nothing is running.
        """
        result = self._run(
            ["compose", "ps", "-a", "--format", "{{ .ID }}"],
            cwd=cwd,
        )
        if result is None:
            return []
        if not result.success:
            logger.debug("docker compose ps failed in %s: %s", cwd, result.failure_reason)
            return []

        return result.stdout.split()

    def inspect_bind_mounts(self, container_id: str, *, cwd: str | None = None) -> list[BindMount]:
        """Get the bind mounts of a single container.

        Args:
            container_id: ID of the container to inspect.
            cwd: Working directory for the docker call.

        Returns:
            Bind mounts of the container, empty if inspection fails.
        """
        result = self._run(
            ["inspect", container_id, "--format", "{{ json .Mounts }}"],
            cwd=cwd,
        )
        if result is None:
            return []
        if not result.success:
            logger.warning(
                "Skipping container %s: docker inspect failed: %s",
                container_id,
                result.failure_reason,
            )
            return []

        try:
            records = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            logger.warning("Skipping container %s: malformed mount JSON: %s", container_id, e)
            return []

        # Containers without mounts report `null`
        if records is None:
            return []
        if not isinstance(records, list):
            logger.warning(
                "Skipping container %s: expected a JSON array of mounts, got %s",
                container_id,
                type(records).__name__,
            )
            return []

        mounts: list[BindMount] = []
        for record in records:
            mount = self._parse_mount(record, container_id)
            if mount is not None:
                mounts.append(mount)
        return mounts

    def _parse_mount(self, record: Any, container_id: str) -> BindMount | None:
        """Parse one mount record, keeping only bind mounts.

        Args:
            record: Element of the ``.Mounts`` JSON array.
            container_id: Container the record belongs to, for logging.

        Returns:
            BindMount for bind records, None for other types or bad records.
        """
        if not isinstance(record, dict):
            logger.debug("Skipping non-object mount record in %s: %r", container_id, record)
            return None

        if record.get("Type") != BIND_MOUNT_TYPE:
            return None

        try:
            return BindMount.from_docker(record)
        except ValueError as e:
            logger.debug("Skipping bind mount in %s: %s", container_id, e)
            return None

    def _run(self, args: list[str], *, cwd: str | None) -> CommandResult | None:
        """Run a docker subcommand, returning None if it could not run at all."""
        try:
            return run_command([self._docker, *args], timeout=self._timeout, cwd=cwd)
        except subprocess.TimeoutExpired:
            logger.warning("docker %s timed out after %ss", args[0], self._timeout)
        except FileNotFoundError as e:
            # Missing docker binary or a cwd that does not exist
            logger.debug("Cannot run %s %s: %s", self._docker, args[0], e)
        except OSError as e:
            logger.warning("Failed to run docker %s: %s", args[0], e)
        return None
