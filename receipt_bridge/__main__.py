"""Run the receipt bridge service.

Usage:
    python -m receipt_bridge
"""

from __future__ import annotations

import threading
import webbrowser

import uvicorn

from receipt_bridge.config import get_settings
from receipt_bridge.main import create_app


def main() -> None:
    settings = get_settings()
    base_url = f"http://localhost:{settings.port}"

    print("=======================================")
    print("    Receipt printer service started")
    print("=======================================")
    print(f"Service:   {base_url}")
    print(f"Test page: {base_url}/test")
    print(f"API:       {base_url}/api/print")
    print(f"Printer:   {settings.printer_port}")
    print("\nPress Ctrl+C to stop")
    print("=======================================")

    if settings.open_browser:
        # Give the server a moment to bind before the page loads
        threading.Timer(1.0, webbrowser.open, args=(f"{base_url}/test",)).start()

    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
