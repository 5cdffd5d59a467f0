"""Error taxonomy for the issues API client."""


class IssuesClientError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(IssuesClientError):
    """The request never produced a 200 response.

    ``status_code`` is ``None`` when the server could not be reached at all
    (connection refused, DNS failure, timeout).
    """

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message, status_code=status_code)
        self.url = url


class DecodeError(IssuesClientError):
    """The response body was not the JSON envelope the operation expects."""

    MAX_BODY_PREFIX = 512

    def __init__(self, message: str, shape: str, body: bytes) -> None:
        super().__init__(message)
        self.shape = shape
        self.body = body[: self.MAX_BODY_PREFIX]
