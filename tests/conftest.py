"""Shared fixtures: deterministic in-memory fonts."""

from __future__ import annotations

from types import SimpleNamespace as NS

import pytest

from pressmark.config import reset_layout_config


class FakeFont:
    """FontSource with a fixed kerning table in 26.6 fixed point."""

    def __init__(self, pairs: dict[tuple[str, str], int], name: str = "FakeSans") -> None:
        self._pairs = pairs
        self._name = name
        self.calls: list[tuple[str, str]] = []

    @property
    def postscript_name(self) -> str:
        return self._name

    def kerning(self, left: str, right: str) -> int:
        self.calls.append((left, right))
        return self._pairs.get((left, right), 0)


@pytest.fixture
def make_font() -> type[FakeFont]:
    """The FakeFont class, for tests that need their own table."""
    return FakeFont


@pytest.fixture
def fake_font() -> FakeFont:
    """A font kerning A-V by -1.5pt and V-A by -1pt."""
    return FakeFont({("A", "V"): -96, ("V", "A"): -64})


@pytest.fixture(autouse=True)
def _reset_config():
    """Keep ContextVar config from leaking between tests."""
    yield
    reset_layout_config()


class StubTTFont(dict):
    """Stands in for a fontTools TTFont: tables by tag plus a cmap."""

    def __init__(self, tables: dict, cmap: dict[int, str]) -> None:
        super().__init__(tables)
        self._cmap = cmap
        self.closed = False

    def getBestCmap(self) -> dict[int, str]:
        return self._cmap

    def close(self) -> None:
        self.closed = True


def _pair_pos_1(first: str, second: str, advance: int) -> NS:
    return NS(
        Format=1,
        Coverage=NS(glyphs=[first]),
        PairSet=[NS(PairValueRecord=[NS(SecondGlyph=second, Value1=NS(XAdvance=advance))])],
    )


@pytest.fixture
def gpos_ttfont() -> StubTTFont:
    """A 1000 unit/em font kerning only through GPOS.

    - A-V: -80 units, format 1
    - T-o: -50 units, format 2 behind an extension lookup
    - V-A: -999 units, but under the ``mark`` feature, not ``kern``
    """
    class_pairs = NS(
        Format=2,
        Coverage=NS(glyphs=["T"]),
        ClassDef1=NS(classDefs={"T": 1}),
        ClassDef2=NS(classDefs={"o": 1}),
        Class1Record=[
            NS(Class2Record=[NS(Value1=None), NS(Value1=None)]),
            NS(Class2Record=[NS(Value1=None), NS(Value1=NS(XAdvance=-50))]),
        ],
    )
    lookups = [
        NS(LookupType=2, SubTable=[_pair_pos_1("A", "V", -80), _pair_pos_1("A", "T", 0)]),
        NS(LookupType=9, SubTable=[NS(ExtensionLookupType=2, ExtSubTable=class_pairs)]),
        NS(LookupType=2, SubTable=[_pair_pos_1("V", "A", -999)]),
    ]
    gpos = NS(
        FeatureList=NS(
            FeatureRecord=[
                NS(FeatureTag="kern", Feature=NS(LookupListIndex=[0, 1])),
                NS(FeatureTag="mark", Feature=NS(LookupListIndex=[2])),
            ]
        ),
        LookupList=NS(Lookup=lookups),
    )
    cmap = {ord(c): c for c in "AVTox"}
    return StubTTFont({"head": NS(unitsPerEm=1000), "GPOS": NS(table=gpos)}, cmap)


@pytest.fixture
def plain_ttfont() -> StubTTFont:
    """A font with no GPOS table."""
    return StubTTFont({"head": NS(unitsPerEm=2048)}, {ord("A"): "A"})
