"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Read-only repository interface for reference data.

    Reference tables and training datasets are shipped with the package and
    never written back, so only retrieval operations are part of the contract.
    """

    @abstractmethod
    def get(self, id: str) -> T:
        """Retrieve an entity by ID."""
        pass

    @abstractmethod
    def list(self) -> List[str]:
        """List the IDs of all available entities."""
        pass
