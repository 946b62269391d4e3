"""Errors raised across the port boundary."""


class PersistenceError(Exception):
    """
    Any store-level failure: connectivity, timeout, rejected payload.

    The message is safe to return to clients; the driver exception
    is kept as ``__cause__`` for logging only.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
