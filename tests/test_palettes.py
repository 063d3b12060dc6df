"""Tests for the palette tables and name lookup."""

import re

import pytest

from almanac_plots.exceptions import ConfigurationError, InvalidVariantError, UnknownColorError
from almanac_plots.palettes import (
    ECONOMIST_BG,
    ECONOMIST_FG,
    SHAPES,
    SOLARIZED,
    SOLARIZED_ACCENTS,
    SOLARIZED_BASE,
    STATA,
    STATA_SCHEMES,
    pick,
    solarized_rebase,
)

HEX = re.compile(r"^#[0-9a-f]{6}$")


class TestTables:
    """Static palette data."""

    @pytest.mark.parametrize("table", [SOLARIZED, ECONOMIST_BG, ECONOMIST_FG, STATA])
    def test_values_are_24_bit_hex(self, table):
        for name, value in table.items():
            assert HEX.match(value), name

    def test_solarized_has_eight_base_tones_and_eight_accents(self):
        assert len(SOLARIZED) == 16
        assert SOLARIZED_BASE == [
            "base03", "base02", "base01", "base00", "base0", "base1", "base2", "base3",
        ]
        assert SOLARIZED_ACCENTS == [
            "yellow", "orange", "red", "magenta", "violet", "blue", "cyan", "green",
        ]

    def test_stata_schemes_reference_known_colors(self):
        for scheme, names in STATA_SCHEMES.items():
            assert len(names) == 15, scheme
            assert all(name in STATA for name in names)

    def test_shape_sequences_are_marker_fillstyle_pairs(self):
        for sequence in SHAPES.values():
            for marker, fillstyle in sequence:
                assert isinstance(marker, str)
                assert fillstyle in ("full", "none")


class TestPick:
    """Name lookup with explicit or canonical ordering."""

    def test_default_is_table_order(self):
        assert pick(ECONOMIST_BG) == list(ECONOMIST_BG.values())

    def test_explicit_names_keep_requested_order(self):
        assert pick(SOLARIZED, ["green", "base03", "red"]) == ["#859900", "#002b36", "#dc322f"]

    def test_single_name_string(self):
        assert pick(SOLARIZED, "blue") == ["#268bd2"]

    def test_exclude_filters_default_order(self):
        values = pick(SOLARIZED, exclude=lambda name: name.startswith("base"))
        assert values == [SOLARIZED[name] for name in SOLARIZED_ACCENTS]

    @pytest.mark.parametrize("name", ["purple", "Blue", "", "base4", "ebg"])
    def test_unknown_name_raises(self, name):
        with pytest.raises(UnknownColorError) as excinfo:
            pick(SOLARIZED, [name], palette="solarized")
        assert excinfo.value.value == name
        assert excinfo.value.parameter == "colors"
        assert "solarized" in str(excinfo.value)

    def test_excluded_name_is_unknown(self):
        with pytest.raises(UnknownColorError, match="Unknown name 'base03'"):
            pick(SOLARIZED, ["base03"], exclude=lambda name: name.startswith("base"))

    def test_unknown_name_is_a_value_error(self):
        with pytest.raises(ValueError):
            pick(STATA, ["chartreuse"])
        assert issubclass(UnknownColorError, ConfigurationError)


class TestSolarizedRebase:
    """Light and dark relabelling of the base ramp."""

    def test_dark_reads_ramp_forwards(self):
        rebase = solarized_rebase(light=False)
        assert list(rebase.values()) == [SOLARIZED[name] for name in SOLARIZED_BASE]
        assert rebase["rebase03"] == "#002b36"

    def test_light_reads_ramp_backwards(self):
        rebase = solarized_rebase(light=True)
        assert list(rebase.values()) == [SOLARIZED[name] for name in reversed(SOLARIZED_BASE)]
        assert rebase["rebase03"] == "#fdf6e3"

    def test_same_labels_for_both_variants(self):
        assert list(solarized_rebase(True)) == list(solarized_rebase(False))

    @pytest.mark.parametrize("flag", ["yes", 1, None])
    def test_non_bool_flag_raises(self, flag):
        with pytest.raises(InvalidVariantError, match="light"):
            solarized_rebase(flag)
