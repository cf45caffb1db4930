"""Light/dark scheme pair with a switchable active mode."""

import logging
from dataclasses import dataclass

from md3_palettes import catalog
from md3_palettes.config import Settings
from md3_palettes.scheme import MID_TONE, Scheme, build_scheme
from md3_palettes.tonal import TonalPalette

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Palette:
    """Both schemes for one set of seeds; ``active`` is always one of them."""

    light: Scheme
    dark: Scheme
    active: Scheme
    is_dark: bool = False

    @classmethod
    def from_seed_colors(
        cls,
        primary: int,
        secondary: int,
        tertiary: int,
        neutral: int,
        neutral_variant: int,
        *,
        error: int | None = None,
        custom: int | None = None,
    ) -> "Palette":
        """Build light and dark schemes from ARGB seeds, starting in light mode.

        Without an ``error`` seed the preset error palette is used; without a
        ``custom`` seed the custom roles stay transparent.
        """
        tonal = [
            TonalPalette(seed)
            for seed in (primary, secondary, tertiary, neutral, neutral_variant)
        ]
        error_palette = catalog.ERROR if error is None else TonalPalette(error)
        custom_palette = None if custom is None else TonalPalette(custom)

        light = build_scheme(
            *tonal, error_palette, is_dark=False, custom=custom_palette
        )
        dark = build_scheme(*tonal, error_palette, is_dark=True, custom=custom_palette)
        logger.debug(
            "Built palette from seeds primary=%#010x secondary=%#010x tertiary=%#010x",
            primary,
            secondary,
            tertiary,
        )
        return cls(light=light, dark=dark, active=light, is_dark=False)

    @classmethod
    def default(cls) -> "Palette":
        """Palette seeded from the preset baseline palettes at their mid tone."""
        return cls.from_seed_colors(
            catalog.PRIMARY.tone(MID_TONE),
            catalog.SECONDARY.tone(MID_TONE),
            catalog.TERTIARY.tone(MID_TONE),
            catalog.NEUTRAL.tone(MID_TONE),
            catalog.NEUTRAL_VARIANT.tone(MID_TONE),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Palette":
        """Palette from configured seeds, switched to the configured mode."""
        palette = cls.from_seed_colors(
            settings.primary,
            settings.secondary,
            settings.tertiary,
            settings.neutral,
            settings.neutral_variant,
            error=settings.error,
            custom=settings.custom,
        )
        palette.switch_mode(settings.dark)
        return palette

    def switch_mode(self, is_dark: bool) -> None:
        """Point ``active`` at the dark or light scheme."""
        self.active = self.dark if is_dark else self.light
        self.is_dark = is_dark
        logger.debug("Switched palette to %s mode", "dark" if is_dark else "light")

    def toggle(self) -> None:
        """Flip between light and dark."""
        self.switch_mode(not self.is_dark)
