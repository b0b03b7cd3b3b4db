"""Surface encodings for synthesized SVG documents.

Synthesis produces one document; these encoders turn it into whatever the
caller needs (bytes for disk, a data URI for JSON responses).
"""

from __future__ import annotations

import base64
from collections.abc import Callable
from enum import Enum

SVG_MIME_TYPE = "image/svg+xml"
SVG_EXTENSION = "svg"

SvgEncoder = Callable[[str], str | bytes]


class SvgEncoding(str, Enum):
    """Supported output encodings."""

    RAW = "raw"
    DATA_URI = "data_uri"


def well_formed(text: str) -> str:
    """Replace lone UTF-16 surrogates with U+FFFD.

    Paired surrogates are joined into their code point; text that is already
    well-formed is returned unchanged.
    """
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def to_raw(document: str) -> bytes:
    """Encode the document as UTF-8 bytes for persistence."""
    return well_formed(document).encode("utf-8")


def to_data_uri(document: str, mime_type: str = SVG_MIME_TYPE) -> str:
    """Wrap the document in a base64 data URI.

    Args:
        document: SVG document text.
        mime_type: MIME type placed in the URI header.

    Returns:
        ``data:<mime>;base64,<payload>``
    """
    payload = base64.b64encode(to_raw(document)).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


_ENCODERS: dict[SvgEncoding, SvgEncoder] = {
    SvgEncoding.RAW: to_raw,
    SvgEncoding.DATA_URI: to_data_uri,
}


def encode_svg(document: str, encoding: SvgEncoding | str) -> str | bytes:
    """Encode a document with the named encoding.

    Raises:
        ValueError: If the encoding is unknown.
    """
    return _ENCODERS[SvgEncoding(encoding)](document)
