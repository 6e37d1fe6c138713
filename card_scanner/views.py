"""
Search, sort, pagination and selection over contact lists.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Set

from .models import ContactRecord, CONTACT_FIELDS


PAGE_SIZE = 20

ASCENDING = 'asc'
DESCENDING = 'desc'
SORT_DIRECTIONS = (ASCENDING, DESCENDING)


def filter_contacts(contacts: Sequence[ContactRecord], term: str) -> List[ContactRecord]:
    """
    Keep contacts where any value contains the search term.

    The generated id is not searched.

    Args:
        contacts: Contacts to search
        term: Case-insensitive substring; empty keeps everything

    Returns:
        Matching contacts in their original order
    """
    if not term:
        return list(contacts)

    needle = term.lower()
    return [
        contact for contact in contacts
        if any(
            needle in str(value).lower()
            for key, value in contact.to_dict().items() if key != 'id'
        )
    ]


def sort_contacts(
    contacts: Sequence[ContactRecord],
    sort_field: str = 'name',
    direction: str = ASCENDING
) -> List[ContactRecord]:
    """
    Sort contacts by one field, case-insensitively.

    Args:
        contacts: Contacts to sort
        sort_field: One of the contact fields
        direction: 'asc' or 'desc'

    Returns:
        New sorted list
    """
    if sort_field not in CONTACT_FIELDS:
        raise ValueError(f"Cannot sort by {sort_field!r}; choose from {', '.join(CONTACT_FIELDS)}")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Sort direction must be 'asc' or 'desc', got {direction!r}")

    return sorted(
        contacts,
        key=lambda c: c.field_value(sort_field).lower(),
        reverse=direction == DESCENDING
    )


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed for count items."""
    return math.ceil(count / page_size) if count > 0 else 0


def paginate(
    contacts: Sequence[ContactRecord],
    page: int,
    page_size: int = PAGE_SIZE
) -> List[ContactRecord]:
    """
    Slice one page out of a contact list.

    Args:
        contacts: Filtered and sorted contacts
        page: 1-based page number, clamped to the available range
        page_size: Contacts per page

    Returns:
        Contacts on the requested page
    """
    if page_size < 1:
        raise ValueError("page_size must be positive")

    pages = total_pages(len(contacts), page_size)
    page = max(1, min(page, pages or 1))
    start = (page - 1) * page_size
    return list(contacts[start:start + page_size])


@dataclass
class SortState:
    """Current sort field and direction."""
    sort_field: str = 'name'
    direction: str = ASCENDING

    def choose(self, sort_field: str) -> None:
        """Select a sort field; re-selecting the current one flips direction."""
        if sort_field not in CONTACT_FIELDS:
            raise ValueError(f"Cannot sort by {sort_field!r}")
        if sort_field == self.sort_field:
            self.flip()
        else:
            self.sort_field = sort_field
            self.direction = ASCENDING

    def flip(self) -> None:
        self.direction = DESCENDING if self.direction == ASCENDING else ASCENDING

    def apply(self, contacts: Sequence[ContactRecord]) -> List[ContactRecord]:
        return sort_contacts(contacts, self.sort_field, self.direction)


@dataclass
class Selection:
    """Set of selected contact ids."""
    ids: Set[str] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.ids)

    def __contains__(self, contact_id: str) -> bool:
        return contact_id in self.ids

    def toggle(self, contact_id: str) -> None:
        if contact_id in self.ids:
            self.ids.discard(contact_id)
        else:
            self.ids.add(contact_id)

    def all_selected(self, visible: Sequence[ContactRecord]) -> bool:
        """True when every visible contact is selected and there is at least one."""
        return bool(visible) and len(self.ids) == len(visible) and \
            all(c.id in self.ids for c in visible)

    def toggle_all(self, visible: Sequence[ContactRecord]) -> None:
        """Select every visible contact, or clear if all are already selected."""
        if self.all_selected(visible):
            self.ids = set()
        else:
            self.ids = {c.id for c in visible}

    def clear(self) -> None:
        self.ids = set()

    def selected_from(self, contacts: Iterable[ContactRecord]) -> List[ContactRecord]:
        """Selected contacts in the order they appear in contacts."""
        return [c for c in contacts if c.id in self.ids]
