"""Pytest configuration and fixtures."""

import io
from typing import Callable, Generator

import httpx
import pytest
from fastapi.testclient import TestClient
from pypdf import PdfWriter

from app.backend.main import app
from app.backend.services.fetch_service import FileFetchService, get_fetch_service


def build_pdf(*page_streams: bytes) -> bytes:
    """
    Build a minimal PDF with one page per content stream.

    Pages share a Helvetica font resource named /F1. Offsets in the xref
    table are computed so the file parses without repair.
    """
    page_count = len(page_streams)
    font_id = 3
    first_page_id = 4
    page_ids = [first_page_id + 2 * i for i in range(page_count)]

    objects: dict[int, bytes] = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: (
            b"<< /Type /Pages /Kids ["
            + b" ".join(b"%d 0 R" % pid for pid in page_ids)
            + b"] /Count %d >>" % page_count
        ),
        font_id: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    for page_id, stream in zip(page_ids, page_streams):
        objects[page_id] = (
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Resources << /Font << /F1 %d 0 R >> >> /Contents %d 0 R >>"
            % (font_id, page_id + 1)
        )
        objects[page_id + 1] = (
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = {}
    for obj_id in sorted(objects):
        offsets[obj_id] = len(out)
        out += b"%d 0 obj\n" % obj_id + objects[obj_id] + b"\nendobj\n"

    size = max(objects) + 1
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % size
    out += b"0000000000 65535 f \n"
    for obj_id in range(1, size):
        out += b"%010d 00000 n \n" % offsets[obj_id]
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % size
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


def text_stream(text: str) -> bytes:
    """Content stream drawing a single line of text."""
    return b"BT\n/F1 24 Tf\n72 700 Td\n(" + text.encode("latin-1") + b") Tj\nET"


@pytest.fixture
def hello_world_pdf() -> bytes:
    """A valid 1-page PDF containing the text "Hello World"."""
    return build_pdf(text_stream("Hello World"))


@pytest.fixture
def two_page_pdf() -> bytes:
    """A valid 2-page PDF with one line of text per page."""
    return build_pdf(text_stream("First page"), text_stream("Second page"))


@pytest.fixture
def blank_pdf() -> bytes:
    """A valid PDF whose only page has no text layer."""
    return build_pdf(b"")


@pytest.fixture
def aes_encrypted_pdf(hello_world_pdf: bytes) -> bytes:
    """The "Hello World" PDF encrypted with AES-128 and an empty user password."""
    writer = PdfWriter(clone_from=io.BytesIO(hello_world_pdf))
    writer.encrypt(user_password="", owner_password="owner-secret", algorithm="AES-128")
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def invalid_file_bytes() -> bytes:
    """Create invalid (non-PDF) file bytes for testing."""
    return b"This is not a PDF file"


@pytest.fixture
def make_fetch_service() -> Callable[..., FileFetchService]:
    """
    Factory for a fetch service backed by an httpx.MockTransport.

    ``routes`` maps URL to (status_code, body); unknown URLs return 404.
    ``handler`` replaces the routing entirely when given.
    """

    def factory(
        routes: dict[str, tuple[int, bytes]] | None = None,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> FileFetchService:
        table = routes or {}

        def route(request: httpx.Request) -> httpx.Response:
            status_code, body = table.get(str(request.url), (404, b"Not Found"))
            return httpx.Response(status_code, content=body)

        return FileFetchService(transport=httpx.MockTransport(handler or route))

    return factory


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def upstream(client: TestClient, make_fetch_service) -> Callable[..., None]:
    """Point the endpoint's fetch service at a mocked upstream."""

    def install(**kwargs) -> None:
        service = make_fetch_service(**kwargs)
        app.dependency_overrides[get_fetch_service] = lambda: service

    return install
