"""Login and logout transitions."""

from .session import SessionController

__all__ = ["SessionController"]
