"""Service layer for the receipt bridge application."""

from receipt_bridge.services.barcode_encoder import BarcodeEncoder
from receipt_bridge.services.device_sink import DeviceSink
from receipt_bridge.services.job_assembler import JobAssembler
from receipt_bridge.services.print_service import PrintService
from receipt_bridge.services.text_encoder import TextEncoder

__all__ = ["BarcodeEncoder", "DeviceSink", "JobAssembler", "PrintService", "TextEncoder"]
