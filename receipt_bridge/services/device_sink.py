"""Write assembled byte streams to the printer port."""

from __future__ import annotations

import logging
import os
import threading
from typing import Sequence

from receipt_bridge.exceptions import DeviceUnavailableError, PartialWriteError

logger = logging.getLogger(__name__)

_OPEN_FLAGS = os.O_WRONLY | getattr(os, "O_BINARY", 0)


class DeviceSink:
    """Owns the physical write path to the printer.

    Each write is Open -> Write -> Close on the first candidate path that
    opens. The port is a single physical resource, so all sinks in the
    process share one lock and jobs reach the device one at a time.
    """

    _port_lock = threading.Lock()

    def __init__(self, paths: Sequence[str], lock_timeout: float | None = None) -> None:
        """
        Args:
            paths: Device paths naming the printer port, tried in order
            lock_timeout: Seconds to wait for a job already writing; None waits forever
        """
        self.paths = list(paths)
        self.lock_timeout = lock_timeout

    def _open(self) -> tuple[int, str]:
        """Open the first candidate path that accepts a write-only open.

        Returns:
            Tuple of (file descriptor, path)

        Raises:
            DeviceUnavailableError: If no candidate path can be opened
        """
        if not self.paths:
            raise DeviceUnavailableError("No printer device path configured")

        errors: list[str] = []
        for path in self.paths:
            try:
                fd = os.open(path, _OPEN_FLAGS)
            except OSError as exc:
                logger.debug("Could not open printer port %s: %s", path, exc)
                errors.append(f"{path}: {exc.strerror or exc}")
                continue
            return fd, path

        raise DeviceUnavailableError(f"Cannot open printer port ({'; '.join(errors)})")

    def write(self, data: bytes) -> str:
        """Write a complete byte stream to the printer.

        Args:
            data: Assembled job bytes

        Returns:
            The device path that was written to

        Raises:
            DeviceUnavailableError: If the port is busy or cannot be opened or written
            PartialWriteError: If the device accepted fewer bytes than supplied
        """
        timeout = -1 if self.lock_timeout is None else self.lock_timeout
        if not self._port_lock.acquire(timeout=timeout):
            raise DeviceUnavailableError("Printer port is busy with another job")

        try:
            fd, path = self._open()
            try:
                written = os.write(fd, data)
            except OSError as exc:
                raise DeviceUnavailableError(f"Failed to write to printer port {path}: {exc}") from exc
            finally:
                os.close(fd)
        finally:
            self._port_lock.release()

        if written < len(data):
            raise PartialWriteError(f"Printer port {path} accepted {written} of {len(data)} bytes")

        logger.debug("Wrote %d bytes to %s", written, path)
        return path
