"""Dependency functions for FastAPI routes."""

from typing import Annotated

from fastapi import Depends, Request

from receipt_bridge.config import Settings
from receipt_bridge.services import PrintService


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_print_service(request: Request) -> PrintService:
    """Print service shared by every request of the application."""
    return request.app.state.print_service


AppSettings = Annotated[Settings, Depends(get_app_settings)]
PrintServiceDep = Annotated[PrintService, Depends(get_print_service)]
