"""Service layer for encoding text jobs into ESC/POS commands."""

from __future__ import annotations

import logging

from receipt_bridge.models.job import PrintJob
from receipt_bridge.models.segment import EncodedSegment
from receipt_bridge.utils import escpos

logger = logging.getLogger(__name__)

DEFAULT_CODEPAGE = "gbk"


class TextEncoder:
    """Encoder for styled text segments."""

    @staticmethod
    def normalize_line_endings(content: str) -> str:
        return content.replace("\r\n", "\n")

    @staticmethod
    def transcode(content: str, codepage: str = DEFAULT_CODEPAGE) -> tuple[bytes, str | None]:
        """Convert text to the printer's single-byte code page.

        Text that cannot be represented in the code page is not an error: the
        original UTF-8 bytes are returned instead so the job still prints,
        together with a warning describing the degradation.

        Args:
            content: Text with normalized line endings
            codepage: Python codec name of the device code page

        Returns:
            Tuple of (encoded bytes, warning or None)
        """
        try:
            return content.encode(codepage), None
        except (UnicodeEncodeError, LookupError) as exc:
            logger.warning("Falling back to raw UTF-8 text, %s transcoding failed: %s", codepage, exc)
            return content.encode("utf-8"), f"Text could not be converted to {codepage}; printed unconverted"

    @staticmethod
    def encode(job: PrintJob, codepage: str = DEFAULT_CODEPAGE) -> EncodedSegment:
        """Encode a text job.

        Every style switched on before the content is switched off again after
        it, so no style outlives the job.

        Args:
            job: Validated text job
            codepage: Python codec name of the device code page

        Returns:
            EncodedSegment with style setup, content, line feeds and style teardown
        """
        out = bytearray()

        if escpos.in_range(job.font_size, escpos.FONT_SIZE_MIN, escpos.FONT_SIZE_MAX):
            out += escpos.print_mode(job.font_size)
        if job.center:
            out += escpos.ALIGN_CENTER
        if job.bold:
            out += escpos.EMPHASIS_ON

        content, warning = TextEncoder.transcode(
            TextEncoder.normalize_line_endings(job.content or ""), codepage
        )
        out += content
        out += escpos.LF * 2

        if job.bold:
            out += escpos.EMPHASIS_OFF
        if job.center:
            out += escpos.ALIGN_LEFT

        return EncodedSegment(data=bytes(out), warnings=(warning,) if warning else ())
