"""Store-specific errors."""

from typing import Optional


class StoreError(Exception):
    """The document store rejected or could not serve a request."""

    def __init__(
        self,
        message: str,
        status_code: int,
        activity_id: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.activity_id = activity_id

    def __str__(self) -> str:
        return self.message
