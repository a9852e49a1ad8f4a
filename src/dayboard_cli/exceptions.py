"""Exceptions raised by the task store gateway."""


class StoreError(Exception):
    """The remote task store could not complete a request.

    Covers every gateway failure: network errors, rejected credentials,
    constraint violations and responses that cannot be parsed.

    Attributes:
        status_code: HTTP status returned by the store, if one was received
    """

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
