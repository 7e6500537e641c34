"""
Résumé text extraction for scorers that read résumé content.

The workflow never calls this; only real scoring backends do.
"""

import io

import docx
import pdfplumber

from autoapply.contexts.intake.exceptions import UnsupportedResumeFormatError
from autoapply.contexts.intake.intake_state import ResumeFile

PLAINTEXT_EXTENSIONS = (".txt", ".md")


def pdf_to_text(content: bytes) -> str:
    """Extract text from PDF bytes, one block per page."""
    with pdfplumber.open(io.BytesIO(content)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def docx_to_text(content: bytes) -> str:
    """Extract text from DOCX bytes, one line per paragraph."""
    document = docx.Document(io.BytesIO(content))
    return "\n".join(para.text for para in document.paragraphs).strip()


def extract_resume_text(resume: ResumeFile) -> str:
    """
    Extract plain text from a résumé file.

    Supports PDF (via pdfplumber), DOCX (via python-docx) and plain
    text/markdown. Legacy binary .doc files have no extractor.

    Raises:
        UnsupportedResumeFormatError: If the extension has no extractor
    """
    if resume.extension == ".pdf":
        return pdf_to_text(resume.content)
    if resume.extension == ".docx":
        return docx_to_text(resume.content)
    if resume.extension in PLAINTEXT_EXTENSIONS:
        return resume.content.decode("utf-8", errors="replace").strip()
    raise UnsupportedResumeFormatError(resume.name, resume.extension)
