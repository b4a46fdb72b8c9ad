"""mkservice - turn a command line into an enabled systemd service."""

__version__ = "0.2.0"
