"""Base ValueObject class for domain model.

ValueObject - immutable об'єкт, який порівнюється за значенням атрибутів.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True, eq=True)
class ValueObject(ABC):
    """Base class for all domain value objects.

    - **Immutable**: frozen=True
    - **Equality by value**
    - **Replaceable**: щоб "змінити" VO, створюємо новий (dataclasses.replace)

    Example:
        >>> @dataclass(frozen=True)
        ... class EventOption(ValueObject):
        ...     name: str
        ...     odds: Decimal
        ...
        ...     def __post_init__(self):
        ...         validate_value_object(self.odds > 0, "Odds must be positive")
    """

    def __post_init__(self) -> None:
        """Hook для валідації після ініціалізації."""
        pass


def validate_value_object(condition: bool, message: str) -> None:
    """Helper для валідації в value objects.

    Args:
        condition: Умова яка має бути True.
        message: Повідомлення помилки якщо condition False.

    Raises:
        ValueError: If condition is False.
    """
    if not condition:
        raise ValueError(message)
