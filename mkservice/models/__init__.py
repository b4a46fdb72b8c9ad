"""Pydantic data models."""

from mkservice.models.service import ServiceLevel, ServiceSpec

__all__ = ["ServiceLevel", "ServiceSpec"]
