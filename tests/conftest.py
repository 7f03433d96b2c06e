"""Shared fixtures."""

import pytest


def build_pdf(*objects: bytes) -> bytes:
    """Assemble a PDF with a valid xref table around the given objects.

    Object 1 is used as the document catalog.
    """
    body = b"%PDF-1.4\n"
    offsets = []
    for number, obj in enumerate(objects, 1):
        offsets.append(len(body))
        body += str(number).encode() + b" 0 obj\n" + obj + b"\nendobj\n"

    xref_pos = len(body)
    body += b"xref\n0 " + str(len(objects) + 1).encode() + b"\n"
    body += b"0000000000 65535 f \n"
    for offset in offsets:
        body += f"{offset:010d} 00000 n \n".encode()
    body += b"trailer\n<< /Size " + str(len(objects) + 1).encode() + b" /Root 1 0 R >>\n"
    body += b"startxref\n" + str(xref_pos).encode() + b"\n%%EOF\n"
    return body


@pytest.fixture
def catalog_without_pages_pdf() -> bytes:
    """A well-formed file whose catalog has no /Pages entry."""
    return build_pdf(b"<< /Type /Catalog >>")
