"""Models for encoded printer byte streams."""

from pydantic import BaseModel, ConfigDict, Field


class EncodedSegment(BaseModel):
    """Bytes produced by one segment encoder for one job."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    warnings: tuple[str, ...] = Field(default=(), description="Non-fatal encoding issues")


class AssembledJob(BaseModel):
    """Complete byte stream for one job, ready for the device."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    warnings: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.data)
