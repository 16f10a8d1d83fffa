"""Tests for the FastAPI web service."""

from __future__ import annotations

import pytest

try:
    from httpx import AsyncClient, ASGITransport
    _HAS_HTTPX = True
except ImportError:
    _HAS_HTTPX = False

from lml2html.server import app

from conftest import FIXTURE_DIR, encode_box_value

SAMPLE_LML = FIXTURE_DIR / "sample.lml"

pytestmark = pytest.mark.skipif(not _HAS_HTTPX, reason="httpx not installed")


@pytest.fixture
def client():
    """Create an async test client."""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
class TestHealthEndpoint:

    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert "version" in data


@pytest.mark.asyncio
class TestBoxesEndpoint:

    async def test_list_boxes(self, client):
        resp = await client.get("/boxes")
        assert resp.status_code == 200
        data = resp.json()
        assert "boxes" in data
        assert "image" in data["boxes"]


@pytest.mark.asyncio
class TestConvertFileEndpoint:

    async def test_convert_file_upload(self, client):
        resp = await client.post(
            "/convert",
            files={"file": ("doc.lml", b"Hello<anchor />world", "text/plain")},
        )
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert resp.text == "Helloworld"

    async def test_convert_with_encoding(self, client):
        resp = await client.post(
            "/convert",
            files={"file": ("doc.lml", "<p>caf\xe9</p>".encode("latin-1"), "text/plain")},
            data={"encoding": "latin-1"},
        )
        assert resp.status_code == 200
        assert resp.text == "<p>caf\xe9</p>"

    async def test_undecodable_upload(self, client):
        resp = await client.post(
            "/convert",
            files={"file": ("doc.lml", b"\xff\xfe\xfa", "text/plain")},
        )
        assert resp.status_code == 400

    async def test_convert_sample_fixture(self, client):
        if not SAMPLE_LML.exists():
            pytest.skip("sample.lml fixture not found")
        resp = await client.post(
            "/convert",
            files={"file": ("sample.lml", SAMPLE_LML.read_bytes(), "text/plain")},
        )
        assert resp.status_code == 200
        assert "<img" in resp.text
        assert "<focus" not in resp.text


@pytest.mark.asyncio
class TestConvertTextEndpoint:

    async def test_convert_text(self, client):
        resp = await client.post(
            "/convert/text",
            data={"lml": '<lake-box name="hr"></lake-box>'},
        )
        assert resp.status_code == 200
        assert resp.text == '<div class="lake-box-block lake-hr"><hr /></div>'

    async def test_multibyte_box(self, client):
        value = encode_box_value({"url": "图片.png"})
        resp = await client.post(
            "/convert/text",
            data={"lml": f'<lake-box name="image" value="{value}"></lake-box>'},
        )
        assert resp.status_code == 200
        assert 'src="图片.png"' in resp.text

    async def test_bad_box_value(self, client):
        resp = await client.post(
            "/convert/text",
            data={"lml": 'x<lake-box name="image" value="!!"></lake-box>y'},
        )
        assert resp.status_code == 200
        assert resp.text == "xy"
