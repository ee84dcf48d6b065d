"""PDF upload text extraction."""
from __future__ import annotations

import io
from typing import List

import PyPDF2

from resume_ready.errors import ExtractionFailed


def extract_pdf_text(data: bytes) -> str:
    """Return the text layer of every page, joined by newlines.

    Raises ExtractionFailed when the bytes are not a readable PDF or the
    document carries no text at all.
    """
    try:
        reader = PyPDF2.PdfReader(io.BytesIO(data))
        parts: List[str] = []
        for page in reader.pages:
            parts.append(page.extract_text() or "")
    except Exception as e:
        raise ExtractionFailed() from e

    text = "\n".join(parts).strip()
    if not text:
        raise ExtractionFailed()
    return text
