"""
Business card scanner: PDF pages to OCR text to structured contacts.
"""

from .models import ContactRecord, ProcessingProgress, ProcessingResult
from .entities import EntityTable, load_entities
from .extract import extract_contacts, split_cards
from .store import ContactStore
from .session import ScannerSession
from .pipeline import process_file, process_upload

__version__ = "1.0.0"

__all__ = [
    "ContactRecord",
    "ProcessingProgress",
    "ProcessingResult",
    "EntityTable",
    "load_entities",
    "extract_contacts",
    "split_cards",
    "ContactStore",
    "ScannerSession",
    "process_file",
    "process_upload",
]
