"""Base Entity class for domain model.

Entity - об'єкт з унікальною ідентичністю. Два entity з однаковими
атрибутами але різними ID - це різні об'єкти (два trades по 100 на
одну опцію - все одно два окремих trades).
"""

from abc import ABC


class Entity(ABC):
    """Base class for all domain entities.

    Entity порівнюється за ID, а не за значенням атрибутів.
    ID призначається persistence layer при першому save (INSERT),
    після цього він незмінний.

    Example:
        >>> user1 = User(id=1, username="alice", ...)
        >>> user2 = User(id=1, username="bob", ...)
        >>> user1 == user2  # True (same ID)
    """

    def __init__(self, id: int | None = None) -> None:
        """Initialize entity with optional ID.

        Args:
            id: Unique identifier. None для нових entities (ще не збережені в DB).
        """
        self._id = id

    @property
    def id(self) -> int | None:
        """Get entity ID."""
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        """Assign ID after INSERT.

        Raises:
            ValueError: If entity already has a different ID.
        """
        if self._id is not None and self._id != value:
            raise ValueError(
                f"{self.__class__.__name__} already has id={self._id}, cannot reassign"
            )
        self._id = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False

        # Нові entities (без ID) рівні тільки самі собі
        if self._id is None and other._id is None:
            return self is other

        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return hash(id(self))
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"
