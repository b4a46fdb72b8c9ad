"""Custom exceptions for mkservice."""


class MkserviceError(Exception):
    """Base exception for mkservice errors."""

    pass


class UsageError(MkserviceError, ValueError):
    """Raised when command-line arguments are missing or malformed."""

    pass


class InstallError(MkserviceError):
    """Raised when the unit file cannot be written."""

    def __init__(self, path: object, error: OSError | UnicodeError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Failed to write unit file {path}: {error}")


class SubprocessError(MkserviceError):
    """Raised when a service manager command fails or cannot be spawned."""

    def __init__(
        self,
        command: list[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        cmd = " ".join(command)
        if returncode is None:
            msg = f"Could not run '{cmd}'"
        else:
            msg = f"Command '{cmd}' exited with code {returncode}"
        if stderr:
            msg += f": {stderr.strip()}"
        super().__init__(msg)


class UnsupportedInitSystemError(MkserviceError):
    """Raised when no supported init system is detected."""

    pass


class ConfigError(MkserviceError):
    """Raised when an MKSERVICE_* setting is invalid."""

    pass
