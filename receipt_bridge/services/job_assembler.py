"""Assemble the complete printer byte stream for a print job."""

from __future__ import annotations

from receipt_bridge.models.job import JobKind, PrintJob
from receipt_bridge.models.segment import AssembledJob
from receipt_bridge.services.barcode_encoder import BarcodeEncoder
from receipt_bridge.services.text_encoder import DEFAULT_CODEPAGE, TextEncoder
from receipt_bridge.utils import escpos


class JobAssembler:
    """Sequences initialization, the job's segment and the optional cut.

    Pure: the same job always yields the same bytes and nothing is written
    anywhere, so the result can be inspected before it reaches the device.
    """

    def __init__(self, codepage: str = DEFAULT_CODEPAGE) -> None:
        self.codepage = codepage

    def assemble(self, job: PrintJob) -> AssembledJob:
        """Build the byte stream for one job.

        Args:
            job: Validated print job

        Returns:
            AssembledJob starting with printer initialization

        Raises:
            BarcodeLengthError: If EAN data has the wrong length
            BarcodeDataError: If barcode data cannot be framed
        """
        if job.kind == JobKind.BARCODE:
            segment = BarcodeEncoder.encode(job)
        else:
            segment = TextEncoder.encode(job, self.codepage)

        data = escpos.INITIALIZE + segment.data
        if job.cut:
            data += escpos.CUT_PARTIAL_FEED

        return AssembledJob(data=data, warnings=segment.warnings)
