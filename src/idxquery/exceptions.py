# -*- encoding: utf-8 -*-
"""
idxquery Exceptions.

Custom exceptions raised while building and validating secondary index
queries, and while parsing textual index queries.
"""

from typing import Optional


class IndexQueryError(Exception):
    """Base exception for all idxquery errors."""
    pass


class ValidationError(IndexQueryError):
    """
    Raised when a query fails a build-time validation rule.

    Attributes:
        option: Name of the builder option that violated the rule
            (e.g. "max_results", "term_filter"), or "" when not applicable.

    Usage:
        try:
            query = builder.build()
        except ValidationError as e:
            print(f"{e.option}: {e}")
    """

    def __init__(self, message: str, option: str = ""):
        super().__init__(message)
        self.option = option

    def to_dict(self) -> dict:
        """Convert exception to dictionary representation."""
        return {
            "error": type(self).__name__,
            "message": str(self),
            "option": self.option,
        }


class IllegalConfiguration(ValidationError, ValueError):
    """
    Raised when options are set together that cannot be combined.

    Examples: a match value and a range on the same query, a regex term
    filter on an integer index, or a non-positive result limit.
    """
    pass


class TypeMismatchError(ValidationError, TypeError):
    """
    Raised when a key value does not belong to the index kind.

    Kind-specific builders raise this from their constructor, so an
    IntIndexQuery can never be handed a string key.
    """

    def __init__(self, message: str, option: str = "", value: Optional[object] = None):
        super().__init__(message, option=option)
        self.value = value


class MissingRequiredField(ValidationError, ValueError):
    """Raised when location, index name, or a range bound is absent."""
    pass


class QueryParseError(IndexQueryError):
    """
    Raised when a textual index query cannot be parsed.

    Attributes:
        query_string: The text that failed to parse
        original_error: The underlying lark exception
    """

    def __init__(
        self,
        message: str,
        query_string: str = "",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.query_string = query_string
        self.original_error = original_error
