from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from receipt_bridge.config import get_features
from receipt_bridge.dependencies import AppSettings, PrintServiceDep
from receipt_bridge.exceptions import PrintBridgeError
from receipt_bridge.models.job import PrintJob, PrintResponse, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["print"])


def _error(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=PrintResponse(status="error", message=message).model_dump(exclude={"warnings"}),
    )


@router.post("/print", response_model=PrintResponse)
async def print_endpoint(request: Request, service: PrintServiceDep) -> PrintResponse | JSONResponse:
    """HTTP endpoint to print a text or barcode job.

    Returns:
    - 200: Job was written to the printer
    - 400: Invalid request, barcode rejected by the encoder, or printer port failure
    """
    body = await request.body()
    try:
        job = PrintJob.from_json(body)
        assembled = await service.print_job(job)
    except PrintBridgeError as exc:
        logger.info("Rejected print request: %s", exc)
        return _error(str(exc))

    return PrintResponse(status="success", message="Print job sent", warnings=list(assembled.warnings))


@router.options("/print", include_in_schema=False)
async def print_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.api_route("/print", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE"], include_in_schema=False)
async def print_method_not_supported() -> JSONResponse:
    return _error("Only POST requests are supported", status.HTTP_405_METHOD_NOT_ALLOWED)


@router.get("/status", response_model=StatusResponse)
async def status_endpoint(settings: AppSettings) -> StatusResponse:
    """Describe the running service and the encoder's capabilities."""
    return StatusResponse(
        version=settings.version,
        port=settings.printer_port,
        features=get_features(settings.codepage),
    )
