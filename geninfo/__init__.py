"""
gen-info - Extrae la información del header de ROMs de Sega Genesis / Mega Drive
"""

from .errors import GenInfoError, SourceUnavailableError, TruncatedInputError
from .header import HeaderDecoder, HeaderField, RomHeader

__version__ = "0.2.1"

__all__ = [
    "GenInfoError",
    "HeaderDecoder",
    "HeaderField",
    "RomHeader",
    "SourceUnavailableError",
    "TruncatedInputError",
    "__version__",
]
