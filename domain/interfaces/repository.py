"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import Optional

from ..entities import PlayerRecord


class IPlayerRepository(ABC):
    """Interface for the local player store."""

    @abstractmethod
    def upsert(self, record: PlayerRecord) -> None:
        """Insert or wholesale-replace the record keyed by ``player_id``."""

    @abstractmethod
    def lookup(self, player_id: str) -> Optional[PlayerRecord]:
        """Return the stored record or ``None``."""
