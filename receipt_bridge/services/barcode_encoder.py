"""Service layer for encoding barcode jobs into ESC/POS commands.

Each symbology has its own framing function; ``FRAMERS`` maps the symbology
to it so adding a symbology means adding one function and one table entry.
"""

from __future__ import annotations

from typing import Callable

from receipt_bridge.exceptions import BarcodeDataError
from receipt_bridge.models.job import BarcodeSymbology, PrintJob, require_fixed_length
from receipt_bridge.models.segment import EncodedSegment
from receipt_bridge.utils import escpos


def _payload(data: str) -> bytes:
    try:
        return data.encode("ascii")
    except UnicodeEncodeError as exc:
        raise BarcodeDataError(f"Barcode data must be ASCII: {exc}") from exc


def _length_prefixed(system: int, data: str) -> bytes:
    payload = _payload(data)
    if not payload:
        raise BarcodeDataError("Barcode data must not be empty")
    if len(payload) > escpos.MAX_BARCODE_PAYLOAD:
        raise BarcodeDataError(
            f"Barcode data is {len(payload)} bytes, at most {escpos.MAX_BARCODE_PAYLOAD} are supported"
        )
    return escpos.BARCODE_PRINT + bytes((system, len(payload))) + payload


def _fixed_length(system: int, symbology: BarcodeSymbology, data: str) -> bytes:
    require_fixed_length(symbology, data)
    return escpos.BARCODE_PRINT + bytes((system,)) + _payload(data)


def frame_code128(data: str) -> bytes:
    """GS k 73 n d1...dn"""
    return _length_prefixed(escpos.BARCODE_CODE128, data)


def frame_code39(data: str) -> bytes:
    """GS k 4 n d1...dn"""
    return _length_prefixed(escpos.BARCODE_CODE39, data)


def frame_ean13(data: str) -> bytes:
    """GS k 2 d1...d13"""
    return _fixed_length(escpos.BARCODE_EAN13, BarcodeSymbology.EAN13, data)


def frame_ean8(data: str) -> bytes:
    """GS k 3 d1...d8"""
    return _fixed_length(escpos.BARCODE_EAN8, BarcodeSymbology.EAN8, data)


FRAMERS: dict[BarcodeSymbology, Callable[[str], bytes]] = {
    BarcodeSymbology.CODE128: frame_code128,
    BarcodeSymbology.CODE39: frame_code39,
    BarcodeSymbology.EAN13: frame_ean13,
    BarcodeSymbology.EAN8: frame_ean8,
}


class BarcodeEncoder:
    """Encoder for barcode segments."""

    @staticmethod
    def frame(symbology: BarcodeSymbology | None, data: str) -> bytes:
        """Frame barcode data for the given symbology.

        Args:
            symbology: Barcode symbology; None selects CODE128
            data: Barcode payload

        Returns:
            The ``GS k`` command with its payload

        Raises:
            BarcodeLengthError: If EAN data has the wrong length
            BarcodeDataError: If the payload cannot be framed
        """
        framer = FRAMERS.get(symbology or BarcodeSymbology.CODE128, frame_code128)
        return framer(data)

    @staticmethod
    def encode(job: PrintJob) -> EncodedSegment:
        """Encode a barcode job.

        Height and width outside the ranges the printer accepts are skipped so
        the device default applies. Centering is switched back to left
        alignment after the bars.

        Args:
            job: Validated barcode job

        Returns:
            EncodedSegment with setup commands, the framed barcode and teardown

        Raises:
            BarcodeLengthError: If EAN data has the wrong length
            BarcodeDataError: If the payload cannot be framed
        """
        # Frame first so a rejected payload produces no output at all
        frame = BarcodeEncoder.frame(job.symbology, job.barcode_data or "")

        out = bytearray()
        if escpos.in_range(job.barcode_height, escpos.BARCODE_HEIGHT_MIN, escpos.BARCODE_HEIGHT_MAX):
            out += escpos.barcode_height(job.barcode_height)
        if escpos.in_range(job.barcode_width, escpos.BARCODE_WIDTH_MIN, escpos.BARCODE_WIDTH_MAX):
            out += escpos.barcode_width(job.barcode_width)
        out += escpos.hri_position(job.show_barcode_text)
        if job.center:
            out += escpos.ALIGN_CENTER

        out += frame
        out += escpos.LF * 2

        if job.center:
            out += escpos.ALIGN_LEFT

        return EncodedSegment(data=bytes(out))
