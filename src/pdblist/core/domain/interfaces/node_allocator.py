"""Interface for atom record allocation strategies."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.atom import AtomRecord


class NodeAllocator(ABC):
    """Abstract base class for atom record allocators."""

    @abstractmethod
    def allocate(self) -> Optional[AtomRecord]:
        """
        Allocate one blank atom record.

        Returns:
            A new record that belongs to no sequence, or None if the
            allocation failed
        """
        pass
