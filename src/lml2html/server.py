"""FastAPI web service for LML to HTML conversion.

Endpoints::

    GET  /health        Health check.
    GET  /boxes         List built-in box types.
    POST /convert       Upload an LML file and receive HTML back.
    POST /convert/text  Send raw LML text, receive HTML.

Run::

    uvicorn lml2html.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from lml2html import __version__
from lml2html.converter import Converter

app = FastAPI(
    title="lml2html",
    description="Lake Markup Language to HTML conversion service",
    version=__version__,
)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/boxes")
async def list_boxes() -> dict[str, list[str]]:
    """List built-in box types."""
    return {"boxes": Converter.BOX_TYPES}


@app.post("/convert", response_class=HTMLResponse)
async def convert_file(
    file: UploadFile = File(...),
    encoding: str = Form("utf-8"),
) -> HTMLResponse:
    """Upload an LML file and receive HTML back.

    - **file**: LML document
    - **encoding**: Source file encoding
    """
    raw = await file.read()
    try:
        lml_text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise HTTPException(status_code=400, detail=f"Cannot decode upload: {exc}")

    html = Converter().convert_text(lml_text)
    return HTMLResponse(content=html)


@app.post("/convert/text", response_class=HTMLResponse)
async def convert_text(lml: str = Form(...)) -> HTMLResponse:
    """Send raw LML text and receive HTML.

    - **lml**: LML source text
    """
    return HTMLResponse(content=Converter().convert_text(lml))
