"""
Category Entity - Core business logic for catalog categories
"""

from dataclasses import dataclass, field
from datetime import datetime

from clean_catalog.domain.exceptions import ValidationError, validate_and_raise


def _validate_name(name: str) -> None:
    # Only the literal empty string is rejected; whitespace is kept as given.
    validate_and_raise(
        isinstance(name, str) and name != "",
        ValidationError,
        "Category name cannot be empty",
        field="name",
    )


@dataclass
class Category:
    """Category domain entity"""

    id: int | None
    name: str
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate the category after initialization"""
        _validate_name(self.name)

    @property
    def is_persisted(self) -> bool:
        """True once the repository has assigned an ID"""
        return self.id is not None

    def rename(self, new_name: str):
        """Rename the category, leaving it untouched if the name is invalid"""
        _validate_name(new_name)
        self.name = new_name
        self.updated_at = datetime.now()

    @classmethod
    def create(cls, name: str) -> "Category":
        """Create a new, not yet persisted category"""
        now = datetime.now()
        return cls(id=None, name=name, created_at=now, updated_at=now)

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
