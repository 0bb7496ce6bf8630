"""Exceptions raised by the simulation core."""


class InvalidArgumentType(TypeError):
    """Raised when a Vector or Actor argument has the wrong type."""
