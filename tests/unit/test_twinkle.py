"""Tests for the twinkle transformation."""

from __future__ import annotations

import random

import pytest
from hypothesis import given

from orbital_clock.twinkle import (
    BLANK,
    DEFAULT_PALETTE,
    MarkerPalette,
    find_markers,
    twinkle,
)
from tests.helpers.fakes import AlwaysBlank, AlwaysFirst
from tests.helpers.strategies import any_frame, art_frame

pytestmark = pytest.mark.unit


class TestTwinkleProperties:
    @given(art_frame)
    def test_shape_preserved(self, frame: tuple[str, ...]):
        result = twinkle(frame)
        assert len(result) == len(frame)
        assert [len(line) for line in result] == [len(line) for line in frame]

    @given(art_frame)
    def test_non_markers_unchanged_and_markers_from_palette(self, frame: tuple[str, ...]):
        result = twinkle(frame)
        for before_line, after_line in zip(frame, result, strict=True):
            for before, after in zip(before_line, after_line, strict=True):
                if before in DEFAULT_PALETTE:
                    assert after in DEFAULT_PALETTE.substitutes(before)
                else:
                    assert after == before

    @given(any_frame)
    def test_input_not_modified(self, frame: tuple[str, ...]):
        snapshot = tuple(frame)
        twinkle(frame, rng=AlwaysBlank())
        assert frame == snapshot

    @given(any_frame)
    def test_identity_when_markers_keep_themselves(self, frame: tuple[str, ...]):
        assert twinkle(frame, rng=AlwaysFirst()) == frame


class TestTwinkle:
    def test_always_blank_erases_markers(self):
        frame = ("a*b┼c", "**")
        assert twinkle(frame, rng=AlwaysBlank()) == ("a b c", "  ")

    def test_one_choice_per_marker_occurrence(self):
        rng = AlwaysBlank()
        twinkle(("*x*", "┼"), rng=rng)
        assert rng.calls == 3

    def test_returns_new_frame(self):
        frame = ("plain",)
        result = twinkle(frame)
        assert result == frame
        assert isinstance(result, tuple)

    def test_seeded_rng_is_reproducible(self):
        frame = ("* * * ┼ ┼ ┼",) * 4
        assert twinkle(frame, rng=random.Random(7)) == twinkle(frame, rng=random.Random(7))

    def test_every_substitute_eventually_appears(self):
        rng = random.Random(1234)
        seen = {char for _ in range(200) for char in twinkle(("*",), rng=rng)[0]}
        assert seen == {"*", "+", ".", BLANK}

    def test_structural_characters_pass_through(self):
        frame = ("├─┤│+.",)
        assert twinkle(frame, rng=AlwaysBlank()) == frame


class TestMarkerPalette:
    def test_default_palette(self):
        assert DEFAULT_PALETTE.markers == frozenset({"*", "┼"})
        assert DEFAULT_PALETTE.substitutes("*") == ("*", "+", ".", " ")
        assert DEFAULT_PALETTE.substitutes("┼") == ("┼", "├", "─", " ")

    def test_palette_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_PALETTE.as_mapping()["x"] = ("y",)  # type: ignore[index]

    def test_palette_copies_input(self):
        source = {"o": ["o", "O"]}
        palette = MarkerPalette(source)
        source["o"].append("0")
        assert palette.substitutes("o") == ("o", "O")

    @pytest.mark.parametrize("table", [{"ab": ["a"]}, {"a": []}, {"a": ["xy"]}])
    def test_invalid_palettes(self, table):
        with pytest.raises(ValueError):
            MarkerPalette(table)

    def test_custom_palette(self):
        palette = MarkerPalette({"o": ("0",)})
        assert twinkle(("o*o",), palette) == ("0*0",)


class TestFindMarkers:
    def test_positions(self):
        positions = find_markers(("a&b", "==", "#"), "&=#")
        assert [(p.row, p.column, p.char) for p in positions] == [
            (0, 1, "&"),
            (1, 0, "="),
            (1, 1, "="),
            (2, 0, "#"),
        ]

    def test_no_markers(self):
        assert find_markers(("abc",), "*") == []
