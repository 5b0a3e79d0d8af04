"""PDF upload handling for resume files."""

import base64
from io import BytesIO
from typing import Optional

import logfire
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from config.settings import settings
from gateway.models.core import ResumeDocument

PDF_MEDIA_TYPE = "application/pdf"


def read_resume_upload(
    file_name: str,
    content_type: str,
    data: bytes,
    max_bytes: Optional[int] = None,
) -> ResumeDocument:
    """
    Validate an uploaded resume and encode it for the AI gateway.

    Returns:
        ResumeDocument with the base64-encoded file

    Raises:
        ValueError: If the file is not a readable, non-empty PDF
    """
    max_bytes = max_bytes or settings.max_resume_bytes

    with logfire.span("pdf_parser.read_resume_upload", file_name=file_name):
        if (content_type or "").split(";")[0].strip().lower() != PDF_MEDIA_TYPE:
            logfire.warning("Rejected non-PDF upload", file_name=file_name, content_type=content_type)
            raise ValueError("Please upload a valid PDF file.")

        if not data:
            raise ValueError("The uploaded file is empty.")

        if len(data) > max_bytes:
            logfire.warning("Rejected oversized upload", file_name=file_name, size_bytes=len(data))
            raise ValueError(f"The uploaded file is larger than {max_bytes // (1024 * 1024)} MB.")

        try:
            reader = PdfReader(BytesIO(data))
            page_count = len(reader.pages)
        except (PdfReadError, ValueError, OSError) as e:
            logfire.warning(
                "Uploaded file is not a readable PDF",
                file_name=file_name,
                error=str(e),
                error_type=type(e).__name__
            )
            raise ValueError("Please upload a valid PDF file.") from e

        if page_count == 0:
            raise ValueError("The uploaded PDF has no pages.")

        logfire.info("Resume upload accepted", file_name=file_name, size_bytes=len(data), page_count=page_count)

        return ResumeDocument(
            file_name=file_name,
            media_type=PDF_MEDIA_TYPE,
            data=base64.b64encode(data).decode("ascii"),
        )
