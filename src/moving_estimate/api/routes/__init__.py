"""Route group exports."""

from . import estimates, health, prefectures

__all__ = ["estimates", "health", "prefectures"]
