"""Chinese text to pinyin romanization package."""

from .dictionary.repository import DictionaryLoadError
from .models import ConvertResult, RomanizerConfig
from .pipeline import Romanizer, ascii_convert, convert, name, unicode_convert
from .tones import ToneStyle

__all__ = [
    "ConvertResult",
    "DictionaryLoadError",
    "Romanizer",
    "RomanizerConfig",
    "ToneStyle",
    "ascii_convert",
    "convert",
    "name",
    "unicode_convert",
]
