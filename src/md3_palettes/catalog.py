"""Preset tonal palettes shipped with the design system."""

from md3_palettes.tonal import TonalPalette

# Material 2 hues
RED = TonalPalette(0xFFF44336)
PINK = TonalPalette(0xFFE91E63)
PURPLE = TonalPalette(0xFF9C27B0)
DEEP_PURPLE = TonalPalette(0xFF673AB7)
INDIGO = TonalPalette(0xFF3F51B5)
BLUE = TonalPalette(0xFF2196F3)
LIGHT_BLUE = TonalPalette(0xFF03A9F4)
CYAN = TonalPalette(0xFF00BCD4)
TEAL = TonalPalette(0xFF009688)
GREEN = TonalPalette(0xFF4CAF50)
LIGHT_GREEN = TonalPalette(0xFF8BC34A)
LIME = TonalPalette(0xFFCDDC39)
YELLOW = TonalPalette(0xFFFFEB3B)
AMBER = TonalPalette(0xFFFFC107)
ORANGE = TonalPalette(0xFFFF9800)
DEEP_ORANGE = TonalPalette(0xFFFF5722)
BROWN = TonalPalette(0xFF795548)
GREY = TonalPalette(0xFF9E9E9E)
BLUE_GREY = TonalPalette(0xFF607D8B)

# Material 3 baseline
PRIMARY = TonalPalette(0xFF6750A4)
SECONDARY = TonalPalette(0xFF625B71)
TERTIARY = TonalPalette(0xFF7D5260)
ERROR = TonalPalette(0xFFB3261E)
NEUTRAL = TonalPalette(0xFF787579)
NEUTRAL_VARIANT = TonalPalette(0xFF79747E)

PRESETS: dict[str, TonalPalette] = {
    "red": RED,
    "pink": PINK,
    "purple": PURPLE,
    "deep_purple": DEEP_PURPLE,
    "indigo": INDIGO,
    "blue": BLUE,
    "light_blue": LIGHT_BLUE,
    "cyan": CYAN,
    "teal": TEAL,
    "green": GREEN,
    "light_green": LIGHT_GREEN,
    "lime": LIME,
    "yellow": YELLOW,
    "amber": AMBER,
    "orange": ORANGE,
    "deep_orange": DEEP_ORANGE,
    "brown": BROWN,
    "grey": GREY,
    "blue_grey": BLUE_GREY,
    "primary": PRIMARY,
    "secondary": SECONDARY,
    "tertiary": TERTIARY,
    "error": ERROR,
    "neutral": NEUTRAL,
    "neutral_variant": NEUTRAL_VARIANT,
}


def get_preset(name: str) -> TonalPalette:
    """Look up a preset palette by name; ``Deep Purple`` and ``deep-purple`` work."""
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return PRESETS[key]
    except KeyError:
        raise KeyError(
            f"Unknown preset: {name}. Available: {', '.join(PRESETS)}"
        ) from None
