"""Service layer tying the job assembler to the printer device."""

from __future__ import annotations

import asyncio
import logging

from receipt_bridge.config import Settings
from receipt_bridge.exceptions import DeviceTimeoutError, DeviceUnavailableError, PartialWriteError
from receipt_bridge.models.job import JobKind, PrintJob
from receipt_bridge.models.segment import AssembledJob
from receipt_bridge.services.device_sink import DeviceSink
from receipt_bridge.services.job_assembler import JobAssembler
from receipt_bridge.utils.device import device_path_variants, unique

logger = logging.getLogger(__name__)


class PrintService:
    """Service for rendering print jobs and sending them to the printer."""

    def __init__(self, assembler: JobAssembler, sink: DeviceSink, write_timeout: float | None = None) -> None:
        self.assembler = assembler
        self.sink = sink
        self.write_timeout = write_timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> PrintService:
        """Build the service from application settings.

        Explicit ``device_paths`` take precedence; otherwise the naming
        conventions of the host OS for ``printer_port`` are used.
        """
        paths = unique(settings.device_paths) or device_path_variants(settings.printer_port)
        timeout = settings.write_timeout if settings.write_timeout > 0 else None
        return cls(
            assembler=JobAssembler(settings.codepage),
            sink=DeviceSink(paths, lock_timeout=timeout),
            write_timeout=timeout,
        )

    async def print_job(self, job: PrintJob) -> AssembledJob:
        """Encode a job and write it to the printer.

        Encoding happens before the device is touched, so a job rejected by
        an encoder never reaches the port.

        Args:
            job: Validated print job

        Returns:
            The AssembledJob that was written

        Raises:
            BarcodeLengthError: If EAN data has the wrong length
            BarcodeDataError: If barcode data cannot be framed
            DeviceUnavailableError: If the port cannot be opened
            PartialWriteError: If the write was short
            DeviceTimeoutError: If the write did not finish within ``write_timeout``
        """
        assembled = self.assembler.assemble(job)
        logger.info("Printing %s job (%d bytes)", JobKind(job.kind).value, len(assembled))

        try:
            path = await asyncio.wait_for(
                asyncio.to_thread(self.sink.write, assembled.data),
                timeout=self.write_timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.error("Printer write exceeded %.1fs deadline", self.write_timeout)
            raise DeviceTimeoutError(f"Printer did not accept data within {self.write_timeout:g} seconds") from exc
        except (DeviceUnavailableError, PartialWriteError) as exc:
            logger.warning("Print job failed: %s", exc)
            raise

        logger.info("Printed %s job on %s", JobKind(job.kind).value, path)
        return assembled
