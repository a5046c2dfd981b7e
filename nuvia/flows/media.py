"""Decoding of data-URI attachments into model message content."""

import base64
import binascii
import io
import mimetypes
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from docx import Document

from nuvia.config.settings import get_settings
from nuvia.core.exceptions import MediaError

DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?P<params>(?:;[^;,]*)*?);base64,(?P<data>.*)$",
    re.DOTALL,
)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

mimetypes.add_type(DOCX_MIME, ".docx")
mimetypes.add_type("text/markdown", ".md")


@dataclass(frozen=True)
class DataUri:
    """A decoded data URI."""

    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @property
    def is_text(self) -> bool:
        return self.mime_type.startswith("text/")

    def as_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64}"


def parse_data_uri(uri: str, max_bytes: int | None = None) -> DataUri:
    """
    Parse and size-check a base64 data URI.

    Args:
        uri: String of the form ``data:<mimetype>;base64,<encoded_data>``
        max_bytes: Largest accepted decoded payload (defaults to the configured limit)

    Returns:
        DataUri with the MIME type and decoded bytes

    Raises:
        MediaError: If the URI is malformed, empty or too large
    """
    if not uri:
        raise MediaError("No media provided")

    match = DATA_URI_PATTERN.match(uri.strip())
    if match is None:
        raise MediaError(
            "Media must be a data URI in the format 'data:<mimetype>;base64,<encoded_data>'"
        )

    try:
        data = base64.b64decode(re.sub(r"\s+", "", match.group("data")), validate=True)
    except (binascii.Error, ValueError) as e:
        raise MediaError("Media data is not valid base64", details=str(e)) from e

    if not data:
        raise MediaError("Media data is empty")

    if max_bytes is None:
        max_bytes = get_settings().max_media_size_bytes
    if len(data) > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise MediaError(
            f"File too large. Please select a file smaller than {limit_mb:g}MB.",
            details=f"size={len(data)}",
        )

    return DataUri(mime_type=match.group("mime").lower(), data=data)


def extract_docx_text(data: bytes) -> str:
    """Extract paragraph and table text from a DOCX payload."""
    try:
        doc = Document(io.BytesIO(data))
    except Exception as e:
        raise MediaError("Could not read the DOCX document", details=str(e)) from e

    lines = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return "\n".join(lines)


def media_content_blocks(uri: str, file_name: str | None = None) -> list[dict[str, Any]]:
    """
    Convert a data URI into content blocks for a human message.

    Images are sent as ``image_url`` blocks, PDFs as base64 ``document``
    blocks, while text and DOCX files are inlined as text.

    Args:
        uri: The attachment as a data URI
        file_name: Optional file name shown to the model

    Returns:
        List of content block dictionaries

    Raises:
        MediaError: If the media cannot be decoded or its type is unsupported
    """
    media = parse_data_uri(uri)
    label = f' "{file_name}"' if file_name else ""

    if media.is_image:
        return [{"type": "image_url", "image_url": {"url": media.as_uri()}}]

    if media.mime_type == PDF_MIME:
        return [
            {
                "type": "document",
                "source": {
                    "type": "base64",
                    "media_type": PDF_MIME,
                    "data": media.base64,
                },
            }
        ]

    if media.is_text:
        text = media.data.decode("utf-8", errors="replace")
        return [{"type": "text", "text": f"Document{label}:\n```\n{text}\n```"}]

    if media.mime_type == DOCX_MIME:
        text = extract_docx_text(media.data)
        if not text.strip():
            raise MediaError("The DOCX document contains no text")
        return [{"type": "text", "text": f"Document{label}:\n```\n{text}\n```"}]

    raise MediaError(f"Unsupported media type: {media.mime_type}")


def file_to_data_uri(path: str | Path) -> str:
    """
    Read a local file into a base64 data URI.

    The MIME type is guessed from the file extension.

    Raises:
        MediaError: If the file does not exist or its type cannot be guessed
    """
    path = Path(path)
    if not path.is_file():
        raise MediaError(f"File not found: {path}")

    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type is None:
        raise MediaError(f"Could not determine the file type of {path.name}")

    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
