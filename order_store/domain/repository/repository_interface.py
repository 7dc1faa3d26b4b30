from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class RepositoryInterface(ABC, Generic[T]):
    """
    Persistence contract shared by every aggregate root.

    Implementations translate between domain entities and stored rows;
    callers never see ORM objects.
    """

    @abstractmethod
    async def create(self, entity: T) -> None:
        """Persist a new entity. Storage errors are not translated."""

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Overwrite the stored state of an existing entity."""

    @abstractmethod
    async def find(self, id: str) -> T:
        """
        Load one entity by id.

        Raises:
            NotFoundError: if the entity cannot be loaded
        """

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Load every stored entity."""
