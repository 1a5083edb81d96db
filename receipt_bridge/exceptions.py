"""Custom exceptions for the receipt bridge application."""


class PrintBridgeError(RuntimeError):
    """Base class for every failure surfaced to a print request."""


class JobValidationError(PrintBridgeError):
    """Raised when a print request cannot be turned into a valid print job."""


class BarcodeLengthError(JobValidationError):
    """Raised when fixed-length barcode data (EAN-13, EAN-8) has the wrong length."""


class BarcodeDataError(JobValidationError):
    """Raised when barcode data cannot be framed for the printer."""


class DeviceUnavailableError(PrintBridgeError):
    """Raised when the printer port cannot be opened under any known name."""


class PartialWriteError(PrintBridgeError):
    """Raised when the printer port accepts fewer bytes than were supplied."""


class DeviceTimeoutError(PrintBridgeError):
    """Raised when writing to the printer port exceeds the configured deadline."""
