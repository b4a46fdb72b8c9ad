"""Parsing helpers for command-line values.

Names become unit filenames, so they are restricted to characters systemd
accepts without escaping.
"""

import re

from mkservice.exceptions import UsageError

NAME_PATTERN = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9_-]*$")
NAME_MAX_LENGTH = 256


def validate_name(name: str) -> str:
    """Check that a service name is usable as a unit filename.

    Args:
        name: The requested service name.

    Returns:
        The name, unchanged.

    Raises:
        UsageError: If the name is empty, too long, or has invalid characters.
    """
    if not NAME_PATTERN.match(name):
        raise UsageError(
            f"Name includes invalid characters. Pattern: {NAME_PATTERN.pattern}"
        )
    if len(name) > NAME_MAX_LENGTH:
        raise UsageError(f"Name must not exceed {NAME_MAX_LENGTH} characters.")
    return name


def parse_env(entry: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` assignment.

    The value is everything after the first ``=`` and may be empty.

    Args:
        entry: The raw ``--env`` argument.

    Returns:
        A ``(key, value)`` pair.

    Raises:
        UsageError: If there is no ``=`` or the key is empty.
    """
    key, sep, value = entry.partition("=")
    if not sep:
        raise UsageError(f"Expected KEY=VALUE, got '{entry}'")
    if not key:
        raise UsageError(f"Missing variable name in '{entry}'")
    return key, value
