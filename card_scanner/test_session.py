"""
Tests for the scanning session.
"""

import csv
import io

from .models import ContactRecord
from .session import ScannerSession
from .views import DESCENDING


def session_with(*names, page_size=20):
    session = ScannerSession(page_size=page_size)
    for name in names:
        session.store.add(ContactRecord(name=name, email=f"{name.lower()}@example.com"))
    return session


def test_delete_selected_keeps_the_rest_in_order():
    session = session_with("A", "B", "C", "D", "E", "F")
    contacts = session.store.contacts
    for contact in (contacts[1], contacts[4]):
        session.toggle_select(contact.id)

    removed = session.delete_selected()

    assert removed == 2
    assert session.store.contacts == [contacts[0], contacts[2], contacts[3], contacts[5]]
    assert len(session.selection) == 0


def test_select_all_covers_only_search_matches():
    session = session_with("Anna", "Bert", "Annette")
    session.set_search("ann")

    session.toggle_select_all()

    assert [c.name for c in session.selected_contacts()] == ["Anna", "Annette"]

    session.toggle_select_all()
    assert session.selected_contacts() == []


def test_export_selected_uses_store_order():
    session = session_with("Zoe", "Adam", "Mia")
    session.sort.choose('name')
    for contact in session.store.contacts:
        session.toggle_select(contact.id)

    rows = list(csv.reader(io.StringIO(session.export_selected())))

    assert rows[0] == ["Name", "Title", "Company", "Email", "Phone", "Website", "Address"]
    assert [row[0] for row in rows[1:]] == ["Zoe", "Adam", "Mia"]


def test_visible_page_is_filtered_sorted_and_paginated():
    session = session_with(*[f"Contact {i:02d}" for i in range(25)], "Other")
    session.set_search("contact")
    session.sort.choose('name')  # already name: flips to descending

    view = session.visible_page()

    assert session.sort.direction == DESCENDING
    assert view.page == 1
    assert view.total_pages == 2
    assert view.total_matches == 25
    assert view.contacts[0].name == "Contact 24"
    assert len(view.contacts) == 20

    view = session.next_page()
    assert view.page == 2
    assert [c.name for c in view.contacts] == [f"Contact {i:02d}" for i in range(4, -1, -1)]

    view = session.next_page()
    assert view.page == 2


def test_search_resets_page():
    session = session_with(*[f"C{i}" for i in range(30)])
    session.go_to_page(2)

    session.set_search("c1")

    assert session.current_page == 1


def test_remove_and_clear_all():
    session = session_with("A", "B")
    first, second = session.store.contacts
    session.toggle_select(first.id)

    session.remove(first.id)
    assert session.store.contacts == [second]
    assert first.id not in session.selection

    session.toggle_select(second.id)
    session.clear_all()
    assert len(session.store) == 0
    assert len(session.selection) == 0
    assert session.visible_page().total_pages == 0
