"""Material 3 color scheme assembled from tonal palettes.

A ``Scheme`` is a flat record of named color roles. Each role family
(primary, secondary, ...) reads a fixed set of tones from one tonal palette,
with one tone set for light mode and another for dark mode. The table below
is the design-system constant; nothing here computes tones.
"""

from dataclasses import dataclass, field, fields
from enum import Enum

from md3_palettes import catalog
from md3_palettes.color import NRGBA, TRANSPARENT
from md3_palettes.tonal import TonalPalette, TonalPaletteProvider


class Family(Enum):
    """Role families, one tonal palette each."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    CUSTOM = "custom"
    ERROR = "error"
    NEUTRAL = "neutral"
    NEUTRAL_VARIANT = "neutral_variant"

    def __str__(self) -> str:
        """Return human-readable family name."""
        return self.value.replace("_", " ")


# role -> (light tone, dark tone)
TONES: dict[Family, dict[str, tuple[int, int]]] = {
    Family.PRIMARY: {
        "primary": (40, 80),
        "on_primary": (100, 20),
        "primary_container": (90, 30),
        "on_primary_container": (10, 90),
        "inverse_primary": (80, 40),
    },
    Family.SECONDARY: {
        "secondary": (40, 80),
        "on_secondary": (100, 20),
        "secondary_container": (90, 30),
        "on_secondary_container": (10, 90),
    },
    Family.TERTIARY: {
        "tertiary": (40, 80),
        "on_tertiary": (100, 20),
        "tertiary_container": (90, 30),
        "on_tertiary_container": (10, 90),
    },
    Family.CUSTOM: {
        "custom": (40, 80),
        "on_custom": (100, 20),
        "custom_container": (90, 30),
        "on_custom_container": (10, 90),
    },
    Family.ERROR: {
        "error": (40, 80),
        "on_error": (100, 20),
        "error_container": (90, 30),
        "on_error_container": (10, 90),
    },
    Family.NEUTRAL: {
        "surface": (98, 6),
        "surface_dim": (87, 6),
        "surface_bright": (98, 24),
        "surface_container_lowest": (100, 4),
        "surface_container_low": (96, 10),
        "surface_container": (94, 12),
        "surface_container_high": (92, 17),
        "surface_container_highest": (90, 22),
        "on_surface": (0, 90),
        "inverse_surface": (20, 90),
        "inverse_on_surface": (95, 20),
        "background": (98, 6),
        "on_background": (0, 90),
        "shadow": (0, 0),
        "scrim": (0, 0),
    },
    Family.NEUTRAL_VARIANT: {
        "surface_variant": (90, 30),
        "on_surface_variant": (30, 80),
        "outline": (50, 60),
        "outline_variant": (80, 30),
    },
}

# Mode-independent swatch recorded for every family as ``<family>_tone``.
MID_TONE = 50


@dataclass(slots=True)
class Scheme:
    """Named UI color roles for one display mode.

    Fields left at ``TRANSPARENT`` after a build are roles whose family was
    never supplied; only the optional custom family can end up that way.
    """

    # Key components: FAB, prominent buttons, active states.
    primary: NRGBA = TRANSPARENT
    on_primary: NRGBA = TRANSPARENT
    primary_container: NRGBA = TRANSPARENT
    on_primary_container: NRGBA = TRANSPARENT
    inverse_primary: NRGBA = TRANSPARENT

    # Less prominent components such as filter chips.
    secondary: NRGBA = TRANSPARENT
    on_secondary: NRGBA = TRANSPARENT
    secondary_container: NRGBA = TRANSPARENT
    on_secondary_container: NRGBA = TRANSPARENT

    # Contrasting accents.
    tertiary: NRGBA = TRANSPARENT
    on_tertiary: NRGBA = TRANSPARENT
    tertiary_container: NRGBA = TRANSPARENT
    on_tertiary_container: NRGBA = TRANSPARENT

    # Optional fourth accent, left to the application.
    custom: NRGBA = TRANSPARENT
    on_custom: NRGBA = TRANSPARENT
    custom_container: NRGBA = TRANSPARENT
    on_custom_container: NRGBA = TRANSPARENT

    error: NRGBA = TRANSPARENT
    on_error: NRGBA = TRANSPARENT
    error_container: NRGBA = TRANSPARENT
    on_error_container: NRGBA = TRANSPARENT

    # Surfaces and high emphasis text (neutral), medium emphasis
    # text and outlines (neutral variant).
    surface: NRGBA = TRANSPARENT
    surface_dim: NRGBA = TRANSPARENT
    surface_bright: NRGBA = TRANSPARENT
    surface_container_lowest: NRGBA = TRANSPARENT
    surface_container_low: NRGBA = TRANSPARENT
    surface_container: NRGBA = TRANSPARENT
    surface_container_high: NRGBA = TRANSPARENT
    surface_container_highest: NRGBA = TRANSPARENT
    surface_variant: NRGBA = TRANSPARENT
    on_surface: NRGBA = TRANSPARENT
    on_surface_variant: NRGBA = TRANSPARENT
    inverse_surface: NRGBA = TRANSPARENT
    inverse_on_surface: NRGBA = TRANSPARENT

    background: NRGBA = TRANSPARENT
    on_background: NRGBA = TRANSPARENT

    outline: NRGBA = TRANSPARENT
    outline_variant: NRGBA = TRANSPARENT
    shadow: NRGBA = TRANSPARENT
    shadow_tint: NRGBA = TRANSPARENT
    scrim: NRGBA = TRANSPARENT

    primary_tone: NRGBA = TRANSPARENT
    secondary_tone: NRGBA = TRANSPARENT
    tertiary_tone: NRGBA = TRANSPARENT
    custom_tone: NRGBA = TRANSPARENT
    neutral_tone: NRGBA = TRANSPARENT
    neutral_variant_tone: NRGBA = TRANSPARENT
    error_tone: NRGBA = TRANSPARENT

    is_dark: bool = False
    palettes: dict[Family, TonalPaletteProvider] = field(
        default_factory=dict, repr=False, compare=False
    )

    @classmethod
    def light(
        cls,
        primary: int,
        secondary: int,
        tertiary: int,
        neutral: int,
        neutral_variant: int,
    ) -> "Scheme":
        """Light scheme from five ARGB seeds and the preset error palette."""
        return _from_seeds(
            primary, secondary, tertiary, neutral, neutral_variant, is_dark=False
        )

    @classmethod
    def dark(
        cls,
        primary: int,
        secondary: int,
        tertiary: int,
        neutral: int,
        neutral_variant: int,
    ) -> "Scheme":
        """Dark scheme from five ARGB seeds and the preset error palette."""
        return _from_seeds(
            primary, secondary, tertiary, neutral, neutral_variant, is_dark=True
        )

    def with_tonal_palette(
        self, family: Family, palette: TonalPaletteProvider, is_dark: bool
    ) -> "Scheme":
        """Re-derive every role of ``family`` from ``palette``.

        Also refreshes the family's mid-tone swatch and the retained palette
        reference. The primary family additionally sets ``shadow_tint`` to the
        palette's key color.
        """
        column = 1 if is_dark else 0
        for role, tones in TONES[family].items():
            setattr(self, role, NRGBA.from_argb(palette.tone(tones[column])))
        setattr(self, f"{family.value}_tone", NRGBA.from_argb(palette.tone(MID_TONE)))
        if family is Family.PRIMARY:
            self.shadow_tint = NRGBA.from_argb(palette.key_color)
        self.palettes[family] = palette
        return self

    def with_primary_tonal_palette(
        self, palette: TonalPaletteProvider, is_dark: bool
    ) -> "Scheme":
        """Set the primary roles, ``shadow_tint`` and ``primary_tone``."""
        return self.with_tonal_palette(Family.PRIMARY, palette, is_dark)

    def with_secondary_tonal_palette(
        self, palette: TonalPaletteProvider, is_dark: bool
    ) -> "Scheme":
        """Set the secondary roles and ``secondary_tone``."""
        return self.with_tonal_palette(Family.SECONDARY, palette, is_dark)

    def with_tertiary_tonal_palette(
        self, palette: TonalPaletteProvider, is_dark: bool
    ) -> "Scheme":
        """Set the tertiary roles and ``tertiary_tone``."""
        return self.with_tonal_palette(Family.TERTIARY, palette, is_dark)

    def with_custom_tonal_palette(
        self, palette: TonalPaletteProvider | None, is_dark: bool
    ) -> "Scheme":
        """Set the custom roles and ``custom_tone``; no-op without a palette."""
        if palette is None:
            return self
        return self.with_tonal_palette(Family.CUSTOM, palette, is_dark)

    def with_error_tonal_palette(
        self, palette: TonalPaletteProvider, is_dark: bool
    ) -> "Scheme":
        """Set the error roles and ``error_tone``."""
        return self.with_tonal_palette(Family.ERROR, palette, is_dark)

    def with_neutral_tonal_palette(
        self, palette: TonalPaletteProvider, is_dark: bool
    ) -> "Scheme":
        """Set the surface, background, shadow and scrim roles and ``neutral_tone``."""
        return self.with_tonal_palette(Family.NEUTRAL, palette, is_dark)

    def with_neutral_variant_tonal_palette(
        self, palette: TonalPaletteProvider, is_dark: bool
    ) -> "Scheme":
        """Set the surface-variant and outline roles and ``neutral_variant_tone``."""
        return self.with_tonal_palette(Family.NEUTRAL_VARIANT, palette, is_dark)

    def with_color(self, role: str, argb: int) -> "Scheme":
        """Replace a single role with an explicit ARGB color."""
        if role not in ROLES:
            raise KeyError(f"Unknown role: {role}. Available: {', '.join(ROLES)}")
        setattr(self, role, NRGBA.from_argb(argb))
        return self

    def override(self, **roles: int) -> "Scheme":
        """Replace several roles at once, e.g. ``override(primary=0xFF0061A4)``."""
        unknown = [role for role in roles if role not in ROLES]
        if unknown:
            raise KeyError(f"Unknown role(s): {', '.join(unknown)}")
        for role, argb in roles.items():
            setattr(self, role, NRGBA.from_argb(argb))
        return self

    def color(self, role: str) -> NRGBA:
        """Look up a role by name."""
        if role not in ROLES:
            raise KeyError(f"Unknown role: {role}. Available: {', '.join(ROLES)}")
        return getattr(self, role)

    def tonal_palette(self, family: Family) -> TonalPaletteProvider | None:
        """Return the palette ``family`` was last derived from, if any."""
        return self.palettes.get(family)

    def as_dict(self) -> dict[str, str]:
        """Map every role to its hex string."""
        return {role: getattr(self, role).hex for role in ROLES}


ROLES: tuple[str, ...] = tuple(
    f.name for f in fields(Scheme) if isinstance(f.default, NRGBA)
)


def build_scheme(
    primary: TonalPaletteProvider,
    secondary: TonalPaletteProvider,
    tertiary: TonalPaletteProvider,
    neutral: TonalPaletteProvider,
    neutral_variant: TonalPaletteProvider,
    error: TonalPaletteProvider,
    is_dark: bool,
    custom: TonalPaletteProvider | None = None,
) -> Scheme:
    """Assemble a complete scheme for one mode."""
    return (
        Scheme(is_dark=is_dark)
        .with_primary_tonal_palette(primary, is_dark)
        .with_secondary_tonal_palette(secondary, is_dark)
        .with_tertiary_tonal_palette(tertiary, is_dark)
        .with_custom_tonal_palette(custom, is_dark)
        .with_error_tonal_palette(error, is_dark)
        .with_neutral_tonal_palette(neutral, is_dark)
        .with_neutral_variant_tonal_palette(neutral_variant, is_dark)
    )


def _from_seeds(
    primary: int,
    secondary: int,
    tertiary: int,
    neutral: int,
    neutral_variant: int,
    is_dark: bool,
) -> Scheme:
    """Build tonal palettes for each seed, then the scheme."""
    return build_scheme(
        TonalPalette(primary),
        TonalPalette(secondary),
        TonalPalette(tertiary),
        TonalPalette(neutral),
        TonalPalette(neutral_variant),
        catalog.ERROR,
        is_dark,
    )
