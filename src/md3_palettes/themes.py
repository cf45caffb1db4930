"""Textual themes built from Material 3 schemes."""

from textual.theme import Theme

from md3_palettes.palette import Palette
from md3_palettes.scheme import ROLES, Scheme

VARIABLE_PREFIX = "md-"


def scheme_to_theme(scheme: Scheme, name: str) -> Theme:
    """Map a scheme onto Textual's semantic colors.

    Every role is also exported as a ``$md-<role>`` CSS variable so widgets
    can reach colors Textual has no slot for.
    """
    variables = {
        f"{VARIABLE_PREFIX}{role.replace('_', '-')}": scheme.color(role).hex
        for role in ROLES
    }
    return Theme(
        name=name,
        primary=scheme.primary.hex,
        secondary=scheme.secondary.hex,
        accent=scheme.tertiary.hex,
        error=scheme.error.hex,
        foreground=scheme.on_surface.hex,
        background=scheme.background.hex,
        surface=scheme.surface_container.hex,
        panel=scheme.surface_container_high.hex,
        boost=scheme.surface_container_highest.hex,
        dark=scheme.is_dark,
        variables=variables,
    )


def palette_themes(palette: Palette, name: str) -> tuple[Theme, Theme]:
    """Light and dark themes named ``<name>-light`` and ``<name>-dark``."""
    return (
        scheme_to_theme(palette.light, f"{name}-light"),
        scheme_to_theme(palette.dark, f"{name}-dark"),
    )


def active_theme_name(palette: Palette, name: str) -> str:
    """Name of the theme matching the palette's active mode."""
    return f"{name}-dark" if palette.is_dark else f"{name}-light"
