"""Error taxonomy for Kairos MCP."""


class KairosError(Exception):
    """Base class for errors raised by the planning core."""


class NotFoundError(KairosError):
    """Raised when the requested user does not exist."""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class InvalidInputError(KairosError):
    """Raised for malformed energy levels or work times."""


class StorageFailureError(KairosError):
    """Raised by store implementations when the backing database fails.

    The original driver exception is kept as ``__cause__``.
    """
