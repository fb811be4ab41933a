"""Manage the lifecycle of a docker compose project."""

from __future__ import annotations

from os import PathLike
from types import TracebackType

from composekit.cmd import get_cmd_output, run_command


class DockerCompose:
    """A docker compose project that is started by run() and torn down by stop().

    Used as a context manager, it is started on entry and stopped on exit.
    """

    def __init__(self, project_name: object, docker_compose_dir: str | PathLike[str]) -> None:
        self.project_name = str(project_name)
        self.docker_compose_dir = str(docker_compose_dir)

    def __repr__(self) -> str:
        return (
            f"DockerCompose(project_name={self.project_name!r}, "
            f"docker_compose_dir={self.docker_compose_dir!r})"
        )

    def run(self) -> None:
        """Bring the project up and wait for its services."""
        run_command(
            [
                "docker", "compose", "-p", self.project_name,
                "up", "-d", "--wait", "--timeout", "1200000",
            ],
            f"Starting docker compose in {self.docker_compose_dir}, "
            f"project name: {self.project_name}",
            cwd=self.docker_compose_dir,
        )

    def get_container_ip(self, service_name: str) -> str:
        """Return the IP address of the first container of a service."""
        container_name = f"{self.project_name}-{service_name}-1"
        output = get_cmd_output(
            [
                "docker", "inspect", "-f",
                "{{range.NetworkSettings.Networks}}{{.IPAddress}}{{end}}",
                container_name,
            ],
            f"Get container ip of {container_name}",
        )
        return output.strip()

    def stop(self) -> None:
        """Take the project down, removing volumes and orphans."""
        run_command(
            [
                "docker", "compose", "-p", self.project_name,
                "down", "-v", "--remove-orphans",
            ],
            f"Stopping docker compose in {self.docker_compose_dir}, "
            f"project name: {self.project_name}",
            cwd=self.docker_compose_dir,
        )

    def __enter__(self) -> DockerCompose:
        try:
            self.run()
        except BaseException:
            self.stop()
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()