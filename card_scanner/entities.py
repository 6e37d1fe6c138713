"""
Reference table of known entities used by the card extractor.

Delimiter phrases, company names, person names, titles and address keywords
are loaded from JSON so the matching set can grow without code changes.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union


DEFAULT_ENTITIES_PATH = Path(__file__).with_name("entities.json")

REQUIRED_KEYS = ('delimiters', 'companies', 'names', 'titles', 'street_keywords', 'cities')


@dataclass(frozen=True)
class EntityTable:
    """Known entities, in match-priority order."""
    delimiters: Tuple[str, ...]
    companies: Tuple[Tuple[str, str], ...]  # (substring to look for, display name)
    names: Tuple[str, ...]
    titles: Tuple[str, ...]
    street_keywords: Tuple[str, ...]
    cities: Tuple[str, ...]

    @property
    def delimiter_pattern(self) -> re.Pattern:
        """Zero-width pattern matching right before each delimiter phrase."""
        alternatives = '|'.join(re.escape(d) for d in self.delimiters)
        return re.compile(f'(?=(?:{alternatives}))')

    @property
    def name_pattern(self) -> Optional[re.Pattern]:
        if not self.names:
            return None
        alternatives = '|'.join(re.escape(n) for n in self.names)
        return re.compile(f'(?:{alternatives})', re.IGNORECASE)

    @property
    def title_pattern(self) -> Optional[re.Pattern]:
        # Whole words only, so "Partner" does not hit "Bogner & Partners"
        if not self.titles:
            return None
        alternatives = '|'.join(re.escape(t) for t in self.titles)
        return re.compile(rf'\b(?:{alternatives})\b', re.IGNORECASE)

    @property
    def address_pattern(self) -> Optional[re.Pattern]:
        if not (self.street_keywords or self.cities):
            return None
        keywords = '|'.join(re.escape(k) for k in self.street_keywords + self.cities)
        return re.compile(rf'\d+.*(?:{keywords})', re.IGNORECASE)

    def company_for(self, text: str) -> str:
        """
        Resolve company by literal substring containment.

        Args:
            text: Card segment text

        Returns:
            Display name of the first listed company found, or empty string
        """
        for match, display in self.companies:
            if match in text:
                return display
        return ""


def _is_phrase(value) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _phrases(data: dict, key: str, source: str) -> Tuple[str, ...]:
    # An empty phrase would match at every position
    values = data[key]
    if not isinstance(values, list):
        raise ValueError(f"Entity table {source}: '{key}' must be a list of strings")
    for value in values:
        if not _is_phrase(value):
            raise ValueError(f"Invalid entry in '{key}' of {source}: {value!r}")
    return tuple(values)


def _parse_entities(data: dict, source: str) -> EntityTable:
    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ValueError(f"Entity table {source} is missing keys: {', '.join(missing)}")

    delimiters = _phrases(data, 'delimiters', source)
    if not delimiters:
        raise ValueError(f"Entity table {source} defines no delimiter phrases")

    if not isinstance(data['companies'], list):
        raise ValueError(f"Entity table {source}: 'companies' must be a list")

    companies: List[Tuple[str, str]] = []
    for entry in data['companies']:
        if _is_phrase(entry):
            companies.append((entry, entry))
        elif isinstance(entry, dict) and _is_phrase(entry.get('match')):
            companies.append((entry['match'], entry.get('display') or entry['match']))
        else:
            raise ValueError(f"Invalid company entry in {source}: {entry!r}")

    return EntityTable(
        delimiters=delimiters,
        companies=tuple(companies),
        names=_phrases(data, 'names', source),
        titles=_phrases(data, 'titles', source),
        street_keywords=_phrases(data, 'street_keywords', source),
        cities=_phrases(data, 'cities', source),
    )


def load_entities(path: Optional[Union[str, Path]] = None) -> EntityTable:
    """
    Load the entity reference table.

    Args:
        path: JSON file to load; the bundled table when omitted

    Returns:
        EntityTable instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON, lacks required keys or
            holds anything but non-empty strings in its phrase lists
    """
    entities_path = Path(path) if path else DEFAULT_ENTITIES_PATH

    if not entities_path.exists():
        raise FileNotFoundError(f"Entity table not found: {entities_path}")

    try:
        with open(entities_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in entity table {entities_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Entity table {entities_path} must be a JSON object")

    return _parse_entities(data, str(entities_path))


_default_entities: Optional[EntityTable] = None


def default_entities() -> EntityTable:
    """Return the bundled entity table, loading it once."""
    global _default_entities
    if _default_entities is None:
        _default_entities = load_entities()
    return _default_entities
