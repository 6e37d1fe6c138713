"""
Whole-file pipeline: rasterize pages, recognize text, extract contacts.

Pages are processed strictly one at a time. A page is rendered only after the
previous page's image has been recognized and released, so at most one
rasterized page is held in memory.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Union

from PIL import Image

from .models import ProcessingProgress, ProcessingResult
from .store import ContactStore
from .entities import EntityTable
from .extract import extract_contacts
from .ocr import recognize_text
from .pdf_render import PdfDocument, PdfSource, DEFAULT_RESOLUTION, is_pdf
from .logging_setup import log_progress, log_file_result


Recognizer = Callable[[Image.Image], str]
ProgressCallback = Callable[[ProcessingProgress], None]


def extract_from_pdf(
    source: PdfSource,
    store: ContactStore,
    result: ProcessingResult,
    recognizer: Recognizer = recognize_text,
    entities: Optional[EntityTable] = None,
    resolution: int = DEFAULT_RESOLUTION,
    on_progress: Optional[ProgressCallback] = None,
    logger: Optional[logging.Logger] = None
) -> ProcessingResult:
    """
    Run the page pipeline over one PDF and append contacts to the store.

    Failures propagate; contacts from pages finished before the failure stay
    in the store and are counted in result.

    Args:
        source: PDF path or binary file-like object
        store: Store receiving the contacts
        result: Result object updated as pages complete
        recognizer: Image to text function
        entities: Entity table for extraction
        resolution: Render resolution in dpi
        on_progress: Called after every page with the current progress
        logger: Logger instance

    Returns:
        The updated result
    """
    logger = logger or logging.getLogger(__name__)

    with PdfDocument(source, resolution=resolution, logger=logger) as document:
        progress = ProcessingProgress(current=0, total=document.page_count)
        result.total_pages = progress.total
        if on_progress:
            on_progress(progress)

        for page_number, image in document.iter_page_images():
            logger.debug(f"Processing page {page_number} of {progress.total}")
            text = recognizer(image)
            del image

            contacts = extract_contacts(text, entities)
            for contact in contacts:
                store.add(contact)

            result.contacts_added += len(contacts)
            result.pages_processed = page_number
            progress.current = page_number

            log_progress(logger, progress, source=result.source)
            if on_progress:
                on_progress(progress)

    return result


def process_pdf(
    name: str,
    source: PdfSource,
    store: ContactStore,
    recognizer: Recognizer = recognize_text,
    entities: Optional[EntityTable] = None,
    resolution: int = DEFAULT_RESOLUTION,
    on_progress: Optional[ProgressCallback] = None,
    logger: Optional[logging.Logger] = None
) -> Optional[ProcessingResult]:
    """
    Handle one selected file.

    Files whose name does not have the PDF MIME type are ignored. Any pipeline
    failure is logged and returned in the result instead of being raised.

    Args:
        name: File name used for the MIME check and for logging
        source: PDF path or binary file-like object
        store: Store receiving the contacts

    Returns:
        ProcessingResult, or None when the file was not a PDF
    """
    logger = logger or logging.getLogger(__name__)

    if not is_pdf(name):
        logger.debug(f"Ignoring non-PDF file: {name}")
        return None

    logger.info(f"Starting to process file: {name}")
    result = ProcessingResult(source=name)

    try:
        extract_from_pdf(
            source,
            store,
            result,
            recognizer=recognizer,
            entities=entities,
            resolution=resolution,
            on_progress=on_progress,
            logger=logger
        )
    except Exception as e:
        logger.error(f"Error processing file {name}: {e}", exc_info=True)
        result.error = e

    log_file_result(logger, result)
    return result


def process_file(
    path: Union[str, Path],
    store: ContactStore,
    **kwargs
) -> Optional[ProcessingResult]:
    """Handle a PDF on disk. See process_pdf for keyword arguments."""
    return process_pdf(Path(path).name, str(path), store, **kwargs)


def process_upload(
    filename: str,
    data: BinaryIO,
    store: ContactStore,
    **kwargs
) -> Optional[ProcessingResult]:
    """Handle an in-memory PDF buffer. See process_pdf for keyword arguments."""
    return process_pdf(filename, data, store, **kwargs)
