"""Informational HTML pages served next to the API."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, HTMLResponse

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"

router = APIRouter(tags=["pages"], include_in_schema=False)

_HOME_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>Receipt Printer Service</title>
    <meta charset="UTF-8">
</head>
<body style="font-family: Arial; text-align: center; margin-top: 50px;">
    <h1>Receipt printer service is running</h1>
    <p>Open the <a href="/test">test page</a> to print a sample.</p>
    <p>Text and barcode printing are supported.</p>
    <p>API: POST /api/print, GET /api/status</p>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    return HTMLResponse(_HOME_HTML)


@router.get("/test")
async def test_page() -> FileResponse:
    """Interactive page for sending text and barcode jobs."""
    return FileResponse(STATIC_DIR / "test.html", media_type="text/html")
