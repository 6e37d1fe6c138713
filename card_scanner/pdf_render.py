"""
PDF page rasterization using pdfplumber.
"""

import logging
import mimetypes
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union

import pdfplumber
from PIL import Image


PDF_MIME_TYPE = 'application/pdf'

# pdf.js renders at scale 2.0 of 72 dpi
DEFAULT_RESOLUTION = 144

PdfSource = Union[str, Path, BinaryIO]


class RasterizationError(Exception):
    """Raised when a PDF cannot be opened or a page cannot be rendered."""


def is_pdf(path: Union[str, Path]) -> bool:
    """
    Check whether a file is a PDF by its MIME type.

    Args:
        path: File name or path

    Returns:
        True if the guessed MIME type is application/pdf
    """
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type == PDF_MIME_TYPE


class PdfDocument:
    """Open PDF document that renders one page image at a time."""

    def __init__(
        self,
        source: PdfSource,
        resolution: int = DEFAULT_RESOLUTION,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize document wrapper.

        Args:
            source: Path to a PDF or a binary file-like object
            resolution: Render resolution in dpi
            logger: Logger instance
        """
        self.source = source
        self.resolution = resolution
        self.logger = logger or logging.getLogger(__name__)
        self.pdf: Optional[pdfplumber.PDF] = None

    def open(self) -> None:
        """Decode the PDF document."""
        try:
            self.pdf = pdfplumber.open(self.source)
        except Exception as e:
            self.logger.error(f"Failed to open PDF: {e}")
            raise RasterizationError(f"Cannot open PDF: {e}") from e

        self.logger.info(f"Processing PDF with {self.page_count} pages")

    @property
    def page_count(self) -> int:
        if not self.pdf:
            raise RuntimeError("Document not opened. Call open() first.")
        return len(self.pdf.pages)

    def render_page(self, index: int) -> Image.Image:
        """
        Rasterize one page.

        Args:
            index: Zero-based page index

        Returns:
            PIL image of the page
        """
        if not self.pdf:
            raise RuntimeError("Document not opened. Call open() first.")

        try:
            page = self.pdf.pages[index]
            image = page.to_image(resolution=self.resolution).original
        except Exception as e:
            self.logger.error(f"Failed to render page {index + 1}: {e}")
            raise RasterizationError(f"Cannot render page {index + 1}: {e}") from e

        self.logger.debug(f"Successfully rendered page {index + 1}")
        return image

    def iter_page_images(self) -> Iterator[Tuple[int, Image.Image]]:
        """
        Yield (page_number, image) pairs, rendering each page on demand.

        Only the page being consumed is rasterized; the next one is not
        rendered until the caller asks for it.
        """
        for index in range(self.page_count):
            yield index + 1, self.render_page(index)

    def close(self) -> None:
        """Release the decoded document."""
        if self.pdf:
            try:
                self.pdf.close()
            except Exception as e:
                self.logger.warning(f"Error cleaning up PDF: {e}")
            finally:
                self.pdf = None

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
