"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable record compared by value, e.g. an OAuth profile."""

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Single validated value, accessed via ``.root``.

    Built straight from untrusted input (``Username("alice")``); a failed
    validator surfaces as a 400 at the API boundary.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


class CaseInsensitiveValue(RootValueObject[str]):
    """String whose uniqueness ignores case (usernames, e-mail addresses).

    The original spelling is kept for display; lookups and unique indexes
    use ``normalized()``.
    """

    def normalized(self) -> str:
        """Lowercased form used for uniqueness and lookups."""
        return self.root.lower()
