"""Errors raised around the layout engine.

The engine itself raises nothing for ordinary edge cases (empty inputs,
disabled days, overfilled days). These types cover the boundaries where
inputs enter the system.
"""


class LayoutError(Exception):
    """Base exception for all day layout errors."""

    pass


class LayoutInputError(LayoutError):
    """Raised when layout inputs cannot be read or fail validation.

    Attributes:
        source: Where the inputs came from (usually a file path)
        details: List of error detail strings
    """

    def __init__(self, source: str, details: list[str]):
        self.source = source
        self.details = details
        super().__init__(f"{source}: {'; '.join(details)}")
