"""
Card segmentation and field extraction from recognized page text.
"""

import logging
import re
from typing import List, Optional, Dict

from .models import ContactRecord
from .entities import EntityTable, default_entities


logger = logging.getLogger(__name__)

# Regex patterns
EMAIL_PATTERN = re.compile(r'[\w.-]+@[\w.-]+\.\w+')
PHONE_PATTERN = re.compile(r'(?:\+\d{1,3}[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}')
WEBSITE_PATTERN = re.compile(r'(?:www\.)?[\w-]+\.[\w.-]+')


def split_cards(page_text: str, entities: Optional[EntityTable] = None) -> List[str]:
    """
    Split page text into candidate card segments.

    A new segment starts right before each delimiter phrase; the phrase stays
    in the segment it opens. Pages without any delimiter phrase yield nothing.

    Args:
        page_text: Recognized text of one page
        entities: Entity table with the delimiter phrases

    Returns:
        List of untrimmed segment strings, in page order
    """
    entities = entities or default_entities()

    if not any(delimiter in page_text for delimiter in entities.delimiters):
        return []

    segments = []
    for segment in entities.delimiter_pattern.split(page_text):
        trimmed = segment.strip()
        if not trimmed:
            continue
        if '@' in trimmed or any(d in trimmed for d in entities.delimiters):
            segments.append(segment)

    return segments


def _first_match(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""


def _non_blank_lines(text: str) -> List[str]:
    return [line for line in text.split('\n') if line.strip()]


def _first_matching_line(pattern: Optional[re.Pattern], lines: List[str]) -> str:
    if pattern is None:
        return ""
    for line in lines:
        if pattern.search(line):
            return line.strip()
    return ""


def find_email(text: str) -> str:
    """Return the first email address in text, or empty string."""
    return _first_match(EMAIL_PATTERN, text)


def find_phone(text: str) -> str:
    """Return the first phone number in text, or empty string."""
    return _first_match(PHONE_PATTERN, text)


def find_website(text: str) -> str:
    """Return the first domain-like token in text, or empty string."""
    return _first_match(WEBSITE_PATTERN, text)


def find_address(lines: List[str], entities: EntityTable) -> str:
    """
    Collect address-like lines.

    Args:
        lines: Non-blank lines of the segment
        entities: Entity table with street keywords and city names

    Returns:
        All matching lines, trimmed and joined with ", "
    """
    pattern = entities.address_pattern
    if pattern is None:
        return ""
    return ', '.join(line.strip() for line in lines if pattern.search(line))


def extract_fields(segment: str, entities: Optional[EntityTable] = None) -> Dict[str, str]:
    """
    Extract contact fields from one card segment.

    Every pass is independent; a field with no match is an empty string.

    Args:
        segment: Card segment text
        entities: Entity table for company, name, title and address lookups

    Returns:
        Dictionary keyed by contact field name
    """
    entities = entities or default_entities()
    lines = _non_blank_lines(segment)

    return {
        'name': _first_matching_line(entities.name_pattern, lines),
        'title': _first_matching_line(entities.title_pattern, lines),
        'company': entities.company_for(segment),
        'email': find_email(segment),
        'phone': find_phone(segment),
        'website': find_website(segment),
        'address': find_address(lines, entities),
    }


def extract_contacts(page_text: str, entities: Optional[EntityTable] = None) -> List[ContactRecord]:
    """
    Turn the recognized text of one page into contact records.

    Segments with neither a name nor an email are dropped.

    Args:
        page_text: Recognized text of one page
        entities: Entity table; the bundled one when omitted

    Returns:
        List of ContactRecord objects in segment order
    """
    entities = entities or default_entities()
    contacts = []

    for segment in split_cards(page_text, entities):
        fields = extract_fields(segment, entities)

        if not (fields['name'] or fields['email']):
            logger.debug(f"Discarding segment without name or email: {segment.strip()[:40]!r}")
            continue

        contacts.append(ContactRecord(extracted_text=segment.strip(), **fields))

    return contacts
