"""Data models for the receipt bridge service."""

from receipt_bridge.models.job import (
    BarcodeSymbology,
    JobKind,
    PrintJob,
    PrintResponse,
    StatusResponse,
)
from receipt_bridge.models.segment import AssembledJob, EncodedSegment

__all__ = [
    "AssembledJob",
    "BarcodeSymbology",
    "EncodedSegment",
    "JobKind",
    "PrintJob",
    "PrintResponse",
    "StatusResponse",
]
