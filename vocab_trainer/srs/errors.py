"""
Exceptions raised by the scheduling engine and its persistence layer.
"""


class InvalidArgumentError(ValueError):
    """An engine input is outside its documented domain."""


class ItemNotFoundError(LookupError):
    """No learning item with the requested id exists for this user."""


class SessionNotFoundError(LookupError):
    """No learning session with the requested id exists for this user."""


class StaleItemError(RuntimeError):
    """
    The learning item changed between load and save.

    Raised when a save finds a different version than the one it loaded,
    i.e. another attempt was recorded against the same item concurrently.
    """

    def __init__(self, item_id: str, expected_version: int):
        super().__init__(
            f"Learning item {item_id} was modified concurrently "
            f"(expected version {expected_version})"
        )
        self.item_id = item_id
        self.expected_version = expected_version
