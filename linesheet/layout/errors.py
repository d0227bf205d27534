"""Errors raised by the line sheet layout pipeline."""


class LineSheetError(Exception):
    """Base class for layout pipeline errors."""


class InvalidInputError(LineSheetError, TypeError):
    """The organizer was handed something other than a list of products."""


class ConsistencyError(LineSheetError):
    """A page map and the categories it is applied to disagree."""
