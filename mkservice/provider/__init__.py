"""Init-system integration for mkservice.

Only systemd is supported.
"""

from mkservice.provider.base import ServiceProvider, get_provider

__all__ = ["ServiceProvider", "get_provider"]
