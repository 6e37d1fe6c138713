"""
Text recognition using Tesseract.
"""

import logging
from typing import Optional

import pytesseract
from PIL import Image


OCR_LANGUAGE = 'eng'


class RecognitionError(Exception):
    """Raised when Tesseract is unavailable or fails on an image."""


def recognize_text(image: Image.Image, logger: Optional[logging.Logger] = None) -> str:
    """
    Run OCR on one page image.

    Args:
        image: Rasterized page
        logger: Logger instance

    Returns:
        Recognized plain text
    """
    logger = logger or logging.getLogger(__name__)

    try:
        text = pytesseract.image_to_string(image, lang=OCR_LANGUAGE)
    except pytesseract.TesseractNotFoundError as e:
        logger.error("Tesseract is not installed or not on PATH")
        raise RecognitionError(f"Tesseract not available: {e}") from e
    except (pytesseract.TesseractError, RuntimeError) as e:
        logger.error(f"Error performing OCR: {e}")
        raise RecognitionError(f"OCR failed: {e}") from e

    logger.debug(f"Recognized {len(text)} characters")
    return text
