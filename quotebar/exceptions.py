"""Exceptions raised by the quote transport and parsers."""


class QuotebarError(Exception):
    """Base exception for quotebar errors"""

    pass


class FetchError(QuotebarError):
    """Raised when a fetch from the quote provider fails"""

    pass


class TransportError(FetchError):
    """Raised on connection errors, timeouts and non-success status codes"""

    pass


class MalformedResponseError(FetchError):
    """Raised when the response body is not the expected JSON shape"""

    pass


class EmptyRequestError(FetchError):
    """Raised when a request is built without any symbols"""

    pass
