"""Runtime travel over a generated hex world."""

from .traveler import Traveler
from . import settings

__all__ = ["Traveler", "settings"]
