"""Material 3 color schemes derived from seed colors."""

from md3_palettes.color import NRGBA, TRANSPARENT, parse_argb
from md3_palettes.palette import Palette
from md3_palettes.scheme import ROLES, TONES, Family, Scheme, build_scheme
from md3_palettes.tonal import TonalPalette, TonalPaletteProvider

__all__ = [
    "NRGBA",
    "ROLES",
    "TONES",
    "TRANSPARENT",
    "Family",
    "Palette",
    "Scheme",
    "TonalPalette",
    "TonalPaletteProvider",
    "build_scheme",
    "parse_argb",
]
