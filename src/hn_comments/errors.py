"""Exceptions raised by the HN Comments pipeline."""

from typing import Optional


class HNCommentsError(Exception):
    """Base class for all fatal pipeline errors."""


class FetchError(HNCommentsError):
    """
    The remote feed could not be retrieved.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code # HTTP status of the response, if one was received.


class ParseError(HNCommentsError):
    """
    The fetched bytes are not well-formed feed markup.
    """


class WriteError(HNCommentsError):
    """
    The output feed could not be written to its destination.
    """
