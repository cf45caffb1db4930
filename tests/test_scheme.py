"""Tests for tone selection and scheme mutation."""

import dataclasses

import pytest

from conftest import KEY_COLOR_MARKER, MARKERS, StubPalette
from md3_palettes.color import NRGBA, TRANSPARENT
from md3_palettes.scheme import MID_TONE, ROLES, TONES, Family, Scheme


def _decode(color: NRGBA) -> tuple[int, int]:
    """Return (family marker, tone) encoded by a StubPalette."""
    return color.g, color.b


@pytest.mark.parametrize("is_dark", [False, True])
def test_every_role_reads_its_table_tone(make_scheme, is_dark):
    """Each role comes from its own family's palette at the table tone."""
    scheme = make_scheme(is_dark)
    column = 1 if is_dark else 0

    for family, roles in TONES.items():
        for role, tones in roles.items():
            expected = (MARKERS[family], tones[column])
            assert _decode(getattr(scheme, role)) == expected, role


def test_primary_light_and_dark_tones(make_scheme):
    """Primary uses 40/100/90/10/80 in light and 80/20/30/90/40 in dark."""
    light = make_scheme(is_dark=False)
    dark = make_scheme(is_dark=True)

    assert [c.b for c in (
        light.primary,
        light.on_primary,
        light.primary_container,
        light.on_primary_container,
        light.inverse_primary,
    )] == [40, 100, 90, 10, 80]
    assert [c.b for c in (
        dark.primary,
        dark.on_primary,
        dark.primary_container,
        dark.on_primary_container,
        dark.inverse_primary,
    )] == [80, 20, 30, 90, 40]


def test_neutral_surface_tiers(make_scheme):
    """Surface container tiers step through the neutral ramp."""
    light = make_scheme(is_dark=False)
    dark = make_scheme(is_dark=True)

    tiers = (
        "surface_container_lowest",
        "surface_container_low",
        "surface_container",
        "surface_container_high",
        "surface_container_highest",
    )
    assert [getattr(light, t).b for t in tiers] == [100, 96, 94, 92, 90]
    assert [getattr(dark, t).b for t in tiers] == [4, 10, 12, 17, 22]
    assert (light.surface_dim.b, light.surface_bright.b) == (87, 98)
    assert (dark.surface_dim.b, dark.surface_bright.b) == (6, 24)
    assert light.shadow.b == dark.shadow.b == light.scrim.b == dark.scrim.b == 0


@pytest.mark.parametrize("is_dark", [False, True])
def test_mid_tones_do_not_depend_on_mode(make_scheme, is_dark):
    """Every family records its tone-50 swatch in both modes."""
    scheme = make_scheme(is_dark)

    for family in Family:
        swatch = getattr(scheme, f"{family.value}_tone")
        assert _decode(swatch) == (MARKERS[family], MID_TONE)


@pytest.mark.parametrize("is_dark", [False, True])
def test_shadow_tint_is_primary_key_color(make_scheme, is_dark):
    """shadow_tint is the primary key color, not a tone lookup."""
    scheme = make_scheme(is_dark)
    assert _decode(scheme.shadow_tint) == (MARKERS[Family.PRIMARY], KEY_COLOR_MARKER)


def test_all_roles_set_after_build(make_scheme):
    """No role is left transparent when every family is supplied."""
    scheme = make_scheme(is_dark=False)

    for role in ROLES:
        color = getattr(scheme, role)
        assert color != TRANSPARENT, role
        assert color.a == 0xFF


def test_custom_roles_stay_transparent_without_palette(make_scheme):
    """Without a custom palette only the custom roles keep their zero value."""
    scheme = make_scheme(is_dark=False, with_custom=False)

    custom_roles = set(TONES[Family.CUSTOM]) | {"custom_tone"}
    for role in ROLES:
        if role in custom_roles:
            assert getattr(scheme, role) == TRANSPARENT
        else:
            assert getattr(scheme, role) != TRANSPARENT
    assert scheme.tonal_palette(Family.CUSTOM) is None


def test_custom_setter_without_palette_is_noop(make_scheme):
    """with_custom_tonal_palette(None) returns the same, unchanged scheme."""
    scheme = make_scheme(is_dark=True)
    before = dataclasses.replace(scheme)

    result = scheme.with_custom_tonal_palette(None, is_dark=False)

    assert result is scheme
    assert scheme == before
    assert scheme.palettes == before.palettes


def test_family_setter_is_idempotent(make_scheme):
    """Re-applying the same error palette yields identical fields."""
    scheme = make_scheme(is_dark=False)
    error = StubPalette(0x42)

    first = dataclasses.replace(scheme.with_error_tonal_palette(error, is_dark=True))
    second = dataclasses.replace(scheme.with_error_tonal_palette(error, is_dark=True))

    assert first == second
    assert scheme.error.g == 0x42
    assert scheme.error.b == 80


def test_family_setter_only_touches_its_family(make_scheme):
    """Re-theming the error family leaves every other role alone."""
    scheme = make_scheme(is_dark=False)
    before = dataclasses.replace(scheme)
    error = StubPalette(0x42)

    scheme.with_error_tonal_palette(error, is_dark=False)

    error_roles = set(TONES[Family.ERROR]) | {"error_tone"}
    for role in ROLES:
        if role in error_roles:
            assert getattr(scheme, role).g == 0x42, role
        else:
            assert getattr(scheme, role) == getattr(before, role), role
    assert scheme.tonal_palette(Family.ERROR) is error


def test_build_retains_palettes(make_scheme, stub_palettes):
    """The scheme keeps a reference to each palette it was built from."""
    scheme = make_scheme(is_dark=False)

    for family, palette in stub_palettes.items():
        assert scheme.tonal_palette(family) is palette


def test_with_color_changes_only_target(make_scheme):
    """A single-field override bypasses the tone table and nothing else moves."""
    scheme = make_scheme(is_dark=False)
    before = dataclasses.replace(scheme)

    result = scheme.with_color("primary", 0xFF123456)

    assert result is scheme
    assert scheme.primary == NRGBA(0x12, 0x34, 0x56, 0xFF)
    for role in ROLES:
        if role != "primary":
            assert getattr(scheme, role) == getattr(before, role), role


def test_override_sets_several_roles(make_scheme):
    """override() accepts any number of roles by keyword."""
    scheme = make_scheme(is_dark=True)

    scheme.override(outline=0xFF00FF00, shadow_tint=0x80FF0000)

    assert scheme.outline == NRGBA(0, 0xFF, 0, 0xFF)
    assert scheme.shadow_tint == NRGBA(0xFF, 0, 0, 0x80)


def test_override_rejects_unknown_roles(make_scheme):
    """Unknown role names raise KeyError before anything is written."""
    scheme = make_scheme(is_dark=False)
    before = dataclasses.replace(scheme)

    with pytest.raises(KeyError, match="primray"):
        scheme.override(outline=0xFF000000, primray=0xFF000000)
    with pytest.raises(KeyError, match="Unknown role"):
        scheme.with_color("is_dark", 0xFF000000)

    assert scheme == before


def test_color_lookup_by_name(make_scheme):
    """color() and as_dict() expose roles by name."""
    scheme = make_scheme(is_dark=False)

    assert scheme.color("outline") is scheme.outline
    assert scheme.as_dict()["outline"] == scheme.outline.hex
    assert set(scheme.as_dict()) == set(ROLES)
    with pytest.raises(KeyError):
        scheme.color("palettes")


def test_roles_cover_every_color_field():
    """ROLES lists every color field and nothing else."""
    assert "is_dark" not in ROLES
    assert "palettes" not in ROLES
    for roles in TONES.values():
        assert set(roles) <= set(ROLES)
    assert len(ROLES) == 48


def test_empty_scheme_defaults_to_transparent():
    """A scheme built by hand starts fully transparent."""
    scheme = Scheme()
    assert all(getattr(scheme, role) == TRANSPARENT for role in ROLES)
    assert scheme.is_dark is False


def test_family_str():
    """Families render without underscores."""
    assert str(Family.NEUTRAL_VARIANT) == "neutral variant"
