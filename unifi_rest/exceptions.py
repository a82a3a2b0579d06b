class UnifiControllerError(Exception):
    """Base exception for UnifiController errors."""

    pass


class UnifiAuthenticationError(UnifiControllerError):
    """Raised when authentication with the UniFi Controller fails."""

    pass


class UnifiAPIError(UnifiControllerError):
    """Raised when an API call to the UniFi Controller fails."""

    pass


class UnifiDataError(UnifiControllerError):
    """Raised when there is an error parsing data from the UniFi Controller."""

    pass


class UnifiDecodeError(UnifiDataError):
    """Raised when a JSON value has a kind a tolerant field cannot hold.

    Attributes:
        raw: The offending raw JSON bytes.
    """

    def __init__(self, message: str, raw: bytes = b""):
        super().__init__(message)
        self.raw = raw
