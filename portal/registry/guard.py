"""Owner-only access gate for mutating registry operations."""

from portal.observability.logging import get_logger
from portal.registry.errors import UnauthorizedError

logger = get_logger(__name__)


class AccessGuard:
    """Holds the single owner identity and rejects everyone else.

    The owner is fixed at construction; there is no way to transfer it.
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: str) -> None:
        if not owner:
            raise ValueError("owner must be a non-empty identity")
        self._owner = owner

    @property
    def owner(self) -> str:
        return self._owner

    def check_owner(self, caller: str) -> None:
        """Raise UnauthorizedError unless caller is the owner."""
        if caller != self._owner:
            logger.warning("student_access_denied", caller=caller)
            raise UnauthorizedError(caller)
