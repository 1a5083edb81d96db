"""Tests for job assembly."""

import pytest

from receipt_bridge.exceptions import BarcodeLengthError
from receipt_bridge.models.job import BarcodeSymbology, JobKind, PrintJob
from receipt_bridge.services.job_assembler import JobAssembler
from receipt_bridge.utils import escpos


@pytest.fixture()
def assembler() -> JobAssembler:
    return JobAssembler()


def test_text_job_with_cut(assembler):
    job = PrintJob.model_validate({"kind": "text", "content": "Hello", "cut": True})
    assert assembler.assemble(job).data == b"\x1b@" + b"Hello" + b"\n\n" + b"\x1dVA\x03"


def test_text_job_without_cut_ends_after_content(assembler):
    job = PrintJob.model_validate({"kind": "text", "content": "Hello", "bold": True})
    data = assembler.assemble(job).data
    assert data.startswith(escpos.INITIALIZE)
    assert data.endswith(escpos.EMPHASIS_OFF)
    assert escpos.CUT_PARTIAL_FEED not in data


def test_cut_comes_after_style_teardown(assembler):
    job = PrintJob.model_validate({"content": "Hello", "bold": True, "center": True, "cut": True})
    data = assembler.assemble(job).data
    assert data.endswith(escpos.EMPHASIS_OFF + escpos.ALIGN_LEFT + escpos.CUT_PARTIAL_FEED)


def test_ean13_barcode_job(assembler):
    job = PrintJob.model_validate(
        {
            "kind": "barcode",
            "barcodeSymbology": "EAN13",
            "barcodeData": "1234567890123",
            "barcodeWidth": 3,
            "barcodeHeight": 80,
        }
    )
    data = assembler.assemble(job).data
    assert data == (
        b"\x1b@"
        + b"\x1dh\x50"
        + b"\x1dw\x03"
        + b"\x1dH\x00"
        + b"\x1dk\x02" + b"1234567890123"
        + b"\n\n"
    )


def test_short_ean13_is_rejected(assembler):
    job = PrintJob.model_construct(kind=JobKind.BARCODE, symbology=BarcodeSymbology.EAN13, barcode_data="123")
    with pytest.raises(BarcodeLengthError):
        assembler.assemble(job)


def test_plain_string_kind_selects_barcode_encoder(assembler):
    job = PrintJob.model_construct(kind="barcode", symbology=BarcodeSymbology.CODE128, barcode_data="AB")
    data = assembler.assemble(job).data
    assert b"\x1dk\x49\x02AB" in data


def test_assembly_is_deterministic(assembler):
    job = PrintJob.model_validate(
        {"type": "barcode", "barcodeType": "CODE39", "barcodeData": "ABC", "center": True, "cut": True}
    )
    assert assembler.assemble(job).data == assembler.assemble(job).data


def test_out_of_range_options_never_abort(assembler):
    job = PrintJob.model_validate({"content": "x", "fontSize": 42})
    assert assembler.assemble(job).data == b"\x1b@x\n\n"

    job = PrintJob.model_validate({"type": "barcode", "barcodeData": "A", "barcodeWidth": 99, "barcodeHeight": 999})
    assert assembler.assemble(job).data == b"\x1b@" + escpos.HRI_NONE + b"\x1dk\x49\x01A\n\n"


def test_transcoding_warning_is_carried(assembler):
    job = PrintJob.model_validate({"content": "😀"})
    assembled = assembler.assemble(job)
    assert assembled.warnings
    assert len(assembled) == len(assembled.data)


def test_codepage_is_configurable():
    job = PrintJob.model_validate({"content": "é"})
    assert JobAssembler("cp858").assemble(job).data == b"\x1b@" + "é".encode("cp858") + b"\n\n"
