"""
Data models for the business card scanner.
"""

import uuid
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any


CONTACT_FIELDS = ('name', 'title', 'company', 'email', 'phone', 'website', 'address')


def generate_contact_id() -> str:
    """Return a fresh opaque id for a contact record."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class ContactRecord:
    """One contact extracted from a business card segment."""
    name: str = ""
    title: str = ""
    company: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    address: str = ""
    extracted_text: str = ""  # Raw segment the fields came from
    id: str = field(default_factory=generate_contact_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    def field_value(self, name: str) -> str:
        """Return a contact field by name, empty string if absent."""
        if name not in CONTACT_FIELDS:
            raise ValueError(f"Unknown contact field: {name}")
        return getattr(self, name) or ""

    @property
    def has_name(self) -> bool:
        """Check if contact has a name."""
        return bool(self.name)

    @property
    def has_email(self) -> bool:
        """Check if contact has an email address."""
        return bool(self.email)

    @property
    def is_complete(self) -> bool:
        """Check if contact has name, email and phone."""
        return bool(self.name and self.email and self.phone)


@dataclass
class ProcessingProgress:
    """Pages completed out of the pages in the current file."""
    current: int = 0
    total: int = 0

    @property
    def percentage(self) -> float:
        return (self.current / self.total * 100) if self.total > 0 else 0.0


@dataclass
class ProcessingResult:
    """Outcome of processing one input file."""
    source: str
    total_pages: int = 0
    pages_processed: int = 0
    contacts_added: int = 0
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
