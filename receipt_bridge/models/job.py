"""Pydantic models describing print requests and service responses."""

from __future__ import annotations

import json
from enum import Enum
from json import JSONDecodeError
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from receipt_bridge.exceptions import BarcodeLengthError, JobValidationError
from receipt_bridge.utils.escpos import DEFAULT_BARCODE_HEIGHT, DEFAULT_BARCODE_WIDTH


class JobKind(str, Enum):
    """Selects which segment encoder renders the job."""

    TEXT = "text"
    BARCODE = "barcode"


class BarcodeSymbology(str, Enum):
    """Barcode symbologies the printer can render natively."""

    CODE128 = "CODE128"
    CODE39 = "CODE39"
    EAN13 = "EAN13"
    EAN8 = "EAN8"


# Symbologies whose payload length is fixed by the standard
FIXED_LENGTHS: dict[BarcodeSymbology, int] = {
    BarcodeSymbology.EAN13: 13,
    BarcodeSymbology.EAN8: 8,
}


def require_fixed_length(symbology: BarcodeSymbology, data: str) -> None:
    """Check the payload length of fixed-length symbologies.

    Args:
        symbology: Barcode symbology of the job
        data: Barcode payload

    Raises:
        BarcodeLengthError: If the symbology is fixed-length and the payload
            does not have exactly that many characters
    """
    expected = FIXED_LENGTHS.get(symbology)
    if expected is not None and len(data) != expected:
        name = symbology.value.replace("EAN", "EAN-")
        raise BarcodeLengthError(f"{name} barcode data must be exactly {expected} characters, got {len(data)}")


class PrintJob(BaseModel):
    """Validated description of one print request.

    Built fresh per request and consumed once by the encoder pipeline. Numeric
    options outside the range the printer accepts are kept as given; the
    encoders omit the corresponding command so the device default applies.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: JobKind = Field(JobKind.TEXT, validation_alias=AliasChoices("kind", "type"), description="Job variant")
    content: str | None = Field(None, description="Text to print (text jobs)")
    bold: bool = Field(False, description="Emphasize text")
    center: bool = Field(False, description="Center text or barcode")
    font_size: int = Field(
        0, validation_alias=AliasChoices("fontSize", "font_size"), description="Font size 1-8; other values keep the device default"
    )
    cut: bool = Field(False, description="Cut the paper after printing")
    symbology: BarcodeSymbology = Field(
        BarcodeSymbology.CODE128,
        validation_alias=AliasChoices("barcodeSymbology", "barcodeType", "symbology"),
        description="Barcode symbology; unknown values fall back to CODE128",
    )
    barcode_data: str | None = Field(None, validation_alias=AliasChoices("barcodeData", "barcode_data"))
    show_barcode_text: bool = Field(
        False,
        validation_alias=AliasChoices("showBarcodeText", "showText", "show_barcode_text"),
        description="Print human readable text below the bars",
    )
    barcode_width: int = Field(
        DEFAULT_BARCODE_WIDTH,
        validation_alias=AliasChoices("barcodeWidth", "barcode_width"),
        description="Module width multiplier 2-6",
    )
    barcode_height: int = Field(
        DEFAULT_BARCODE_HEIGHT,
        validation_alias=AliasChoices("barcodeHeight", "barcode_height"),
        description="Bar height in dots 1-255",
    )

    @field_validator("kind", mode="before")
    @classmethod
    def _default_kind(cls, value: Any) -> Any:
        if value is None or value == "":
            return JobKind.TEXT
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("symbology", mode="before")
    @classmethod
    def _normalize_symbology(cls, value: Any) -> BarcodeSymbology:
        if isinstance(value, BarcodeSymbology):
            return value
        if not isinstance(value, str):
            return BarcodeSymbology.CODE128
        key = value.strip().upper().replace("-", "").replace("_", "").replace(" ", "")
        try:
            return BarcodeSymbology(key)
        except ValueError:
            return BarcodeSymbology.CODE128

    @field_validator("bold", "center", "cut", "show_barcode_text", mode="before")
    @classmethod
    def _default_flag(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("font_size", mode="before")
    @classmethod
    def _default_font_size(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("barcode_width", mode="before")
    @classmethod
    def _default_width(cls, value: Any) -> Any:
        return DEFAULT_BARCODE_WIDTH if value in (None, 0) else value

    @field_validator("barcode_height", mode="before")
    @classmethod
    def _default_height(cls, value: Any) -> Any:
        return DEFAULT_BARCODE_HEIGHT if value in (None, 0) else value

    @model_validator(mode="after")
    def _check_required_fields(self) -> PrintJob:
        if self.kind is JobKind.TEXT:
            if not self.content:
                raise ValueError("content is required for text jobs")
            return self

        if not self.barcode_data:
            raise ValueError("barcodeData is required for barcode jobs")
        if not self.barcode_data.isascii():
            raise ValueError("barcodeData must contain ASCII characters only")
        require_fixed_length(self.symbology, self.barcode_data)
        return self

    @classmethod
    def from_json(cls, raw: bytes | str) -> PrintJob:
        """Parse and validate a JSON request body.

        Args:
            raw: Request body

        Returns:
            Validated PrintJob

        Raises:
            JobValidationError: If the body is not a JSON object or fails validation
            BarcodeLengthError: If EAN data has the wrong length
        """
        try:
            payload = json.loads(raw)
        except (JSONDecodeError, UnicodeDecodeError) as exc:
            raise JobValidationError(f"Invalid JSON payload: {exc}") from exc

        if not isinstance(payload, dict):
            raise JobValidationError("Payload must be a JSON object.")

        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise JobValidationError(_describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        message = error["msg"].removeprefix("Value error, ")
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


class PrintResponse(BaseModel):
    """Body returned by the print endpoint."""

    status: Literal["success", "error"]
    message: str
    warnings: list[str] = Field(default_factory=list, description="Non-fatal issues, e.g. text not transcoded")


class StatusResponse(BaseModel):
    """Body returned by the status endpoint."""

    status: Literal["running"] = "running"
    version: str
    port: str
    features: list[str]
