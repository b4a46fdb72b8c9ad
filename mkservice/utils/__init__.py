"""Utility functions."""

from mkservice.utils.args import parse_env, validate_name

__all__ = ["parse_env", "validate_name"]
