"""Exceptions raised while resolving and binding slider components."""


class SwiperAttributeError(Exception):
    """Base class for all engine errors."""


class StructuralError(SwiperAttributeError, ValueError):
    """A required role is missing under a component.

    Attributes:
        role: The role value that could not be found (e.g. ``"wrapper"``).
    """

    def __init__(self, role: str, message: str) -> None:
        super().__init__(message)
        self.role = role


class MissingDependencyError(SwiperAttributeError, RuntimeError):
    """The slider library is not available at initialize time."""
