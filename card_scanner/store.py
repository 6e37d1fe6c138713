"""
In-memory contact store for one scanning session.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from .models import ContactRecord


class ContactStore:
    """Ordered collection of contact records with add/remove/clear."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._contacts: List[ContactRecord] = []
        self.logger = logger or logging.getLogger(__name__)

    @property
    def contacts(self) -> List[ContactRecord]:
        """Snapshot of all records in insertion order."""
        return list(self._contacts)

    def add(self, contact: ContactRecord) -> None:
        """Append one record. Duplicates are kept."""
        self._contacts.append(contact)
        self.logger.debug(f"Added contact {contact.id} ({contact.name or contact.email})")

    def remove(self, contact_id: str) -> None:
        """Remove a record by id. Unknown ids are ignored."""
        self._contacts = [c for c in self._contacts if c.id != contact_id]

    def remove_many(self, contact_ids: Iterable[str]) -> int:
        """
        Remove every record whose id is in contact_ids.

        Args:
            contact_ids: Ids to remove

        Returns:
            Number of records removed
        """
        ids = set(contact_ids)
        before = len(self._contacts)
        self._contacts = [c for c in self._contacts if c.id not in ids]
        removed = before - len(self._contacts)
        self.logger.debug(f"Removed {removed} contacts")
        return removed

    def clear(self) -> None:
        """Remove all records."""
        self._contacts = []

    def get(self, contact_id: str) -> Optional[ContactRecord]:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[ContactRecord]:
        return iter(list(self._contacts))
