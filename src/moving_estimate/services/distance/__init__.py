"""Distance resolution between customer addresses."""

from .resolver import DistanceResolver

__all__ = ["DistanceResolver"]
