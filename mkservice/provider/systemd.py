"""systemd provider: renders unit files and drives systemctl."""

import logging
import subprocess
from pathlib import Path

from mkservice.exceptions import InstallError, SubprocessError
from mkservice.models.service import ServiceLevel, ServiceSpec
from mkservice.provider.base import ServiceProvider

logger = logging.getLogger(__name__)

WANTED_BY = "multi-user.target"
SERVICE_TYPE = "simple"

# Prefix for each unit line when logging the rendered file
LOG_PREFIX = "\n>  "


def systemd_quote(tokens: tuple[str, ...] | list[str]) -> str:
    """Quote command tokens for an ExecStart line.

    Each token is wrapped in double quotes; embedded double quotes are
    backslash-escaped.

    Args:
        tokens: Executable path and arguments.

    Returns:
        Space-separated quoted tokens.
    """
    return " ".join('"{}"'.format(t.replace('"', '\\"')) for t in tokens)


def render_unit(service: ServiceSpec) -> str:
    """Render the unit file text for a service.

    Args:
        service: The service to render.

    Returns:
        Unit file contents with a trailing newline.
    """
    lines = [
        "[Unit]",
        f"Description={service.name}",
        "[Install]",
        f"WantedBy={WANTED_BY}",
        "[Service]",
    ]
    lines.extend(f"Environment={key}={value}" for key, value in service.env_vars)
    lines.append(f"ExecStart={systemd_quote(service.command)}")
    lines.append(f"Type={SERVICE_TYPE}")
    return "\n".join(lines) + "\n"


def write_unit(path: Path, content: str) -> None:
    """Write unit text to disk as UTF-8.

    The text is encoded before the file is opened, so a unit that can't be
    encoded never truncates an existing file.

    Raises:
        InstallError: If the text can't be encoded or the file can't be written.
    """
    try:
        data = content.encode("utf-8")
        with open(path, "wb") as f:
            f.write(data)
    except (OSError, UnicodeError) as e:
        raise InstallError(path, e) from e


class SystemdProvider(ServiceProvider):
    """systemd service provider."""

    def unit_dir(self) -> Path:
        """Directory the unit file goes into for the service's level."""
        if self.service.level == ServiceLevel.USER:
            return self.settings.user_unit_dir
        return self.settings.system_unit_dir

    def unit_path(self) -> Path:
        """Full install path of the unit file."""
        return self.unit_dir() / self.service.unit_name

    def systemctl_command(self, *args: str) -> list[str]:
        """Build a systemctl command line for the service's level."""
        command = [self.settings.systemctl]
        if self.service.level == ServiceLevel.USER:
            command.append("--user")
        command.extend(args)
        return command

    def systemctl(self, *args: str) -> None:
        """Run systemctl and wait for it.

        Raises:
            SubprocessError: If systemctl can't be run or exits non-zero.
        """
        command = self.systemctl_command(*args)
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except OSError as e:
            raise SubprocessError(command, stderr=str(e)) from e

        if result.stdout:
            logger.debug("%s", result.stdout.rstrip())
        if result.returncode != 0:
            raise SubprocessError(command, result.returncode, result.stderr)

    def to_unit(self) -> str:
        """Render this provider's service as unit text."""
        return render_unit(self.service)

    def install(self) -> Path:
        """Write the unit file, reload systemd and enable the unit.

        Returns:
            Path of the written unit file.

        Raises:
            InstallError: If the unit file can't be written.
            SubprocessError: If a systemctl call fails.
        """
        content = self.to_unit()
        path = self.unit_path()

        if self.service.level == ServiceLevel.USER:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise InstallError(path, e) from e

        logger.info(
            "Writing systemd unit to %s:%s%s",
            path,
            LOG_PREFIX,
            content.rstrip("\n").replace("\n", LOG_PREFIX),
        )
        write_unit(path, content)

        logger.info("Reloading systemd daemon...")
        self.systemctl("daemon-reload")

        logger.info("Enabling service...")
        self.systemctl("enable", self.service.name)

        return path

    def start(self) -> None:
        """Start the unit now.

        Raises:
            SubprocessError: If systemctl fails.
        """
        logger.info("Starting service...")
        self.systemctl("start", self.service.name)
