"""Module extracting plain text from uploaded documents."""

from io import BytesIO
from pathlib import Path
from zipfile import BadZipFile

import docx
from docx.opc.exceptions import PackageNotFoundError
from loguru import logger
from pypdf import PdfReader


class DocumentExtractionError(ValueError):
    """Raised if a document cannot be turned into text."""


class EmptyDocumentError(DocumentExtractionError):
    """Raised if a document contains no text to be analysed."""


def _extract_pdf(content: bytes) -> str:
    # Corrupt PDFs break pypdf in many ways beyond `PyPdfError`.
    try:
        reader = PdfReader(BytesIO(content))
        return "\n".join(page.extract_text() or "" for page in reader.pages)
    except Exception as e:  # noqa: BLE001
        raise DocumentExtractionError(str(e) or type(e).__name__) from e


def _extract_docx(content: bytes) -> str:
    document = docx.Document(BytesIO(content))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def extract_text(content: bytes, filename: str) -> str:
    """
    Extract text from a document based on the extension of its name.

    PDF files are read page by page, Word files paragraph by paragraph and any other
    file is decoded as UTF-8 text with undecodable bytes replaced.

    Args:
        content (bytes): Raw content of the document.
        filename (str): Name of the document, used to recognise its format.

    Raises:
        DocumentExtractionError: Raised if the document is malformed.
        EmptyDocumentError: Raised if the document contains no text.

    Returns:
        str: Text of the document.
    """
    extension = Path(filename).suffix.lower()
    try:
        if extension == ".pdf":
            text = _extract_pdf(content)
        elif extension in {".docx", ".doc"}:
            text = _extract_docx(content)
        else:
            text = content.decode("utf-8", errors="replace")
    except (
        BadZipFile,
        DocumentExtractionError,
        KeyError,
        OSError,
        PackageNotFoundError,
        ValueError,
    ) as e:
        raise DocumentExtractionError(
            f"Failed to read `{filename}`. Please, ensure it is a valid text-based "
            "PDF or DOCX, or copy-paste the text manually."
        ) from e

    if not text.strip():
        raise EmptyDocumentError(f"No text content could be found in `{filename}`.")

    logger.info(f"Extracted {len(text)} character(s) from `{filename}`.")
    return text


def extract_text_from_path(path: Path) -> str:
    """
    Extract text from a document stored on a disk.

    Args:
        path (Path): Path to the document.

    Raises:
        DocumentExtractionError: Raised if the document is malformed or missing.
        EmptyDocumentError: Raised if the document contains no text.

    Returns:
        str: Text of the document.
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise DocumentExtractionError(f"Failed to open `{path}`.") from e
    return extract_text(content, path.name)
