"""
Tests for the logging helpers.
"""

import logging

from .logging_setup import log_stats, log_file_result, log_progress
from .models import ProcessingProgress, ProcessingResult
from .ocr import RecognitionError


def test_log_stats_formats_shares(caplog):
    caplog.set_level(logging.INFO)
    logger = logging.getLogger("card_scanner.stats")

    log_stats(logger, {"Total": 3, "With Emails": (2, 3), "Empty": (0, 0), "Ratio": 0.5}, title="Summary")

    lines = [record.getMessage() for record in caplog.records]
    assert lines == [
        "=== Summary ===",
        "  Total: 3",
        "  With Emails: 2/3 (66.7%)",
        "  Empty: 0/0 (0.0%)",
        "  Ratio: 0.50",
        "=" * 15,
    ]


def test_log_progress_names_the_file(caplog):
    caplog.set_level(logging.INFO)

    log_progress(logging.getLogger("card_scanner.progress"), ProcessingProgress(1, 4), source="scans.pdf")

    assert caplog.records[0].getMessage() == "scans.pdf: page 1/4 (25.0%)"


def test_log_file_result_warns_on_error(caplog):
    caplog.set_level(logging.INFO)
    result = ProcessingResult(source="scans.pdf", total_pages=4, pages_processed=2,
                              contacts_added=3, error=RecognitionError("Tesseract crashed"))

    log_file_result(logging.getLogger("card_scanner.result"), result)

    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == (
        "Stopped scans.pdf after 2/4 pages: 3 contacts kept (RecognitionError: Tesseract crashed)"
    )
