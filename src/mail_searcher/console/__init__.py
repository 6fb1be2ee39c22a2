"""Terminal presentation: ANSI screens and the interactive menu."""

from .render import Palette
from .session import InteractiveSession

__all__ = ["InteractiveSession", "Palette"]
