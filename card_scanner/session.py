"""
Scanning session: the contact store plus the view state around it.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .models import ContactRecord
from .store import ContactStore
from .views import (
    PAGE_SIZE, Selection, SortState,
    filter_contacts, paginate, total_pages,
)
from .writer import contacts_to_csv


@dataclass
class PageView:
    """One rendered page of the contact list."""
    contacts: List[ContactRecord]
    page: int
    total_pages: int
    total_matches: int


class ScannerSession:
    """
    Owns the contacts of one session and the state used to browse them.

    All mutations go through this object from a single thread; the store is
    never written from anywhere else while a session is active.
    """

    def __init__(
        self,
        store: Optional[ContactStore] = None,
        page_size: int = PAGE_SIZE,
        logger: Optional[logging.Logger] = None
    ):
        self.store = store or ContactStore()
        self.page_size = page_size
        self.logger = logger or logging.getLogger(__name__)
        self.search_term = ""
        self.sort = SortState()
        self.selection = Selection()
        self.current_page = 1

    def set_search(self, term: str) -> None:
        """Change the search term and go back to the first page."""
        self.search_term = term
        self.current_page = 1

    def filtered(self) -> List[ContactRecord]:
        """Contacts matching the search, in the current sort order."""
        return self.sort.apply(filter_contacts(self.store.contacts, self.search_term))

    def visible_page(self) -> PageView:
        matches = self.filtered()
        pages = total_pages(len(matches), self.page_size)
        self.current_page = max(1, min(self.current_page, pages or 1))

        return PageView(
            contacts=paginate(matches, self.current_page, self.page_size),
            page=self.current_page,
            total_pages=pages,
            total_matches=len(matches)
        )

    def go_to_page(self, page: int) -> PageView:
        self.current_page = page
        return self.visible_page()

    def next_page(self) -> PageView:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> PageView:
        return self.go_to_page(self.current_page - 1)

    def toggle_select(self, contact_id: str) -> None:
        self.selection.toggle(contact_id)

    def toggle_select_all(self) -> None:
        """Select every contact matching the search, or clear the selection."""
        self.selection.toggle_all(self.filtered())

    def selected_contacts(self) -> List[ContactRecord]:
        """Selected contacts in store order."""
        return self.selection.selected_from(self.store.contacts)

    def delete_selected(self) -> int:
        """
        Delete the selected contacts.

        Returns:
            Number of contacts removed
        """
        removed = self.store.remove_many(self.selection.ids)
        self.selection.clear()
        self.logger.info(f"Deleted {removed} selected contacts")
        return removed

    def export_selected(self) -> str:
        """Render the selected contacts as CSV text."""
        return contacts_to_csv(self.selected_contacts())

    def remove(self, contact_id: str) -> None:
        self.store.remove(contact_id)
        self.selection.ids.discard(contact_id)

    def clear_all(self) -> None:
        self.store.clear()
        self.selection.clear()
        self.current_page = 1
