"""Hypothesis strategies for art frames."""

from __future__ import annotations

from hypothesis import strategies as st

from orbital_clock.twinkle import DEFAULT_PALETTE

_ART_CHARS = "".join(sorted(DEFAULT_PALETTE.markers)) + " .|-()@O#&=~xyz├─+"

art_line = st.text(alphabet=_ART_CHARS, max_size=60)
art_frame = st.lists(art_line, max_size=20).map(tuple)

any_line = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\r\n"),
    max_size=60,
)
any_frame = st.lists(any_line, max_size=10).map(tuple)
