"""HTTP bridge rendering print jobs into ESC/POS for parallel-port receipt printers."""

__version__ = "2.0.0"
