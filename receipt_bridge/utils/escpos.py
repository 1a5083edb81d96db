"""ESC/POS command vocabulary for thermal receipt printers.

This module holds the raw control sequences the encoders emit, range
constants for the parameterized commands, and small builders that turn a
parameter into a complete command.
"""

from __future__ import annotations


ESC = b"\x1b"
GS = b"\x1d"
LF = b"\n"

# Printer control
INITIALIZE = ESC + b"@"  # ESC @
CUT_PARTIAL_FEED = GS + b"V" + bytes((65, 3))  # GS V 65 3: feed 3 lines then partial cut

# Text style
ALIGN_LEFT = ESC + b"a" + b"\x00"  # ESC a 0
ALIGN_CENTER = ESC + b"a" + b"\x01"  # ESC a 1
EMPHASIS_ON = ESC + b"E" + b"\x01"  # ESC E 1
EMPHASIS_OFF = ESC + b"E" + b"\x00"  # ESC E 0

# Barcode setup
HRI_NONE = GS + b"H" + b"\x00"  # GS H 0
HRI_BELOW = GS + b"H" + b"\x02"  # GS H 2
BARCODE_PRINT = GS + b"k"  # GS k m ...

# Barcode system selectors for GS k
BARCODE_EAN13 = 2
BARCODE_EAN8 = 3
BARCODE_CODE39 = 4
BARCODE_CODE128 = 73

# Parameter ranges
FONT_SIZE_MIN, FONT_SIZE_MAX = 1, 8
BARCODE_WIDTH_MIN, BARCODE_WIDTH_MAX = 2, 6
BARCODE_HEIGHT_MIN, BARCODE_HEIGHT_MAX = 1, 255
MAX_BARCODE_PAYLOAD = 255  # single length byte

DEFAULT_BARCODE_WIDTH = 3
DEFAULT_BARCODE_HEIGHT = 100


def in_range(value: int, low: int, high: int) -> bool:
    return low <= value <= high


def print_mode(font_size: int) -> bytes:
    """Build ``ESC ! n`` for a one-based font size.

    Args:
        font_size: Font size between 1 and 8

    Returns:
        The command bytes, parameterized with the zero-based font index

    Raises:
        ValueError: If font size is out of range
    """
    if not in_range(font_size, FONT_SIZE_MIN, FONT_SIZE_MAX):
        raise ValueError(f"Font size must be between {FONT_SIZE_MIN} and {FONT_SIZE_MAX}, got {font_size}")
    return ESC + b"!" + bytes((font_size - 1,))


def barcode_height(dots: int) -> bytes:
    """Build ``GS h n`` for a bar height in device dots.

    Raises:
        ValueError: If height is out of range
    """
    if not in_range(dots, BARCODE_HEIGHT_MIN, BARCODE_HEIGHT_MAX):
        raise ValueError(f"Barcode height must be between {BARCODE_HEIGHT_MIN} and {BARCODE_HEIGHT_MAX}, got {dots}")
    return GS + b"h" + bytes((dots,))


def barcode_width(multiplier: int) -> bytes:
    """Build ``GS w n`` for a module width multiplier.

    Raises:
        ValueError: If width is out of range
    """
    if not in_range(multiplier, BARCODE_WIDTH_MIN, BARCODE_WIDTH_MAX):
        raise ValueError(f"Barcode width must be between {BARCODE_WIDTH_MIN} and {BARCODE_WIDTH_MAX}, got {multiplier}")
    return GS + b"w" + bytes((multiplier,))


def hri_position(show_text: bool) -> bytes:
    return HRI_BELOW if show_text else HRI_NONE
