"""かな→ローマ字（ヘボン式・日本式・訓令式）変換"""

from .kana_tables import Scheme, resolve_tables
from .romanizer import (
    ConversionRequest,
    ConversionResult,
    RomanizeOptions,
    Romanizer,
    convert,
    romanize,
)

__version__ = "0.1.0"

__all__ = [
    "Scheme",
    "resolve_tables",
    "ConversionRequest",
    "ConversionResult",
    "RomanizeOptions",
    "Romanizer",
    "convert",
    "romanize",
]
