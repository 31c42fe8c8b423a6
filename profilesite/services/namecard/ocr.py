"""
Business-card OCR using Pillow preprocessing and Tesseract.
"""

import asyncio
import logging
from pathlib import Path
from typing import Union

import pytesseract
from PIL import Image, ImageFilter, ImageOps

from common.utils.exceptions import InternalServerException

logger = logging.getLogger(__name__)


class NamecardOCR:
    """
    Extracts text from name-card images.

    Preprocessing: fix EXIF orientation, grayscale, shrink to at most
    `max_width` pixels wide (never enlarge), auto-contrast, sharpen.
    """

    def __init__(self, languages: str = "jpn+eng", max_width: int = 1200):
        """
        Initialize NamecardOCR.

        Args:
            languages: Tesseract language string
            max_width: Maximum image width after resizing
        """
        self.languages = languages
        self.max_width = max_width

    def preprocess(self, image: Image.Image) -> Image.Image:
        """Normalize an image for OCR."""
        image = ImageOps.exif_transpose(image)
        image = image.convert("L")

        if image.width > self.max_width:
            height = max(1, round(image.height * self.max_width / image.width))
            image = image.resize((self.max_width, height), Image.Resampling.LANCZOS)

        image = ImageOps.autocontrast(image)
        return image.filter(ImageFilter.SHARPEN)

    def _extract_sync(self, path: Path) -> str:
        with Image.open(path) as image:
            processed = self.preprocess(image)
        text = pytesseract.image_to_string(processed, lang=self.languages)
        return text.strip()

    async def extract_text(self, path: Union[str, Path]) -> str:
        """
        Run OCR on an image file.

        Args:
            path: Image file path

        Returns:
            Stripped OCR text

        Raises:
            InternalServerException: Image could not be read or OCR failed
        """
        logger.info(f"OCR started: {path}")
        try:
            text = await asyncio.to_thread(self._extract_sync, Path(path))
        except (OSError, ValueError, pytesseract.TesseractError) as e:
            logger.error(f"OCR failed for {path}: {e}")
            raise InternalServerException(
                message="テキスト抽出に失敗しました",
                code="OCR_FAILED",
            )

        logger.info(f"OCR finished: {len(text)} characters extracted")
        return text
