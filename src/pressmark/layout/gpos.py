"""OpenType GPOS pair kerning.

FreeType's ``get_kerning`` only reads the legacy ``kern`` table. Most
current OpenType fonts kern through PairPos lookups behind the GPOS
``kern`` feature instead; those are read here with fontTools.

Both PairPos formats are supported:

- Format 1: explicit glyph pairs
- Format 2: class-based pairs

Extension lookups (type 9) are unwrapped. Values are kept in font design
units and scaled to 26.6 at lookup time.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont, TTLibError

from pressmark.layout.fixed import float_to_fixed_26_6
from pressmark.utils.logger import get_logger

logger = get_logger(__name__)

PAIR_POS = 2
EXTENSION = 9


def _x_advance(record: Any) -> int:
    value = getattr(record, "Value1", None)
    if not value:
        return 0
    return getattr(value, "XAdvance", 0) or 0


@dataclass(frozen=True, slots=True)
class _ClassPairs:
    """A format 2 subtable: adjustments between glyph classes."""

    coverage: frozenset[str]
    first_classes: dict[str, int]
    second_classes: dict[str, int]
    records: list[Any]

    def x_advance(self, left: str, right: str) -> int:
        if left not in self.coverage:
            return 0
        c1 = self.first_classes.get(left, 0)
        if c1 >= len(self.records):
            return 0
        row = self.records[c1].Class2Record
        c2 = self.second_classes.get(right, 0)
        if c2 >= len(row):
            return 0
        return _x_advance(row[c2])


def _kern_subtables(gpos: Any) -> Iterator[Any]:
    """PairPos subtables of every lookup the ``kern`` feature references."""
    if not gpos.FeatureList or not gpos.LookupList:
        return
    indices: set[int] = set()
    for record in gpos.FeatureList.FeatureRecord:
        if record.FeatureTag == "kern":
            indices.update(record.Feature.LookupListIndex)

    for index in sorted(indices):
        lookup = gpos.LookupList.Lookup[index]
        for subtable in lookup.SubTable:
            if lookup.LookupType == EXTENSION:
                if subtable.ExtensionLookupType != PAIR_POS:
                    continue
                subtable = subtable.ExtSubTable
            elif lookup.LookupType != PAIR_POS:
                continue
            yield subtable


class GposKerning:
    """Pair adjustments from a font's GPOS ``kern`` feature.

    Usage:
        kerning = GposKerning.from_font(TTFont("Inter.otf"))
        kerning.kerning("A", "V", 12)  # 26.6 fixed point at 12pt

    Adjustments from several subtables for the same pair add up.

    """

    __slots__ = ("_cmap", "_units_per_em", "_pairs", "_class_pairs")

    def __init__(self, cmap: dict[int, str], units_per_em: int) -> None:
        self._cmap = cmap
        self._units_per_em = units_per_em
        self._pairs: dict[tuple[str, str], int] = {}
        self._class_pairs: list[_ClassPairs] = []

    @classmethod
    def from_font(cls, font: TTFont) -> GposKerning:
        """Collect the PairPos data of an open fontTools font."""
        kerning = cls(font.getBestCmap() or {}, font["head"].unitsPerEm)
        if "GPOS" in font:
            for subtable in _kern_subtables(font["GPOS"].table):
                kerning._add_subtable(subtable)
        return kerning

    def _add_subtable(self, subtable: Any) -> None:
        match subtable.Format:
            case 1:
                for first, pair_set in zip(subtable.Coverage.glyphs, subtable.PairSet):
                    for record in pair_set.PairValueRecord:
                        advance = _x_advance(record)
                        if advance:
                            key = (first, record.SecondGlyph)
                            self._pairs[key] = self._pairs.get(key, 0) + advance
            case 2:
                self._class_pairs.append(
                    _ClassPairs(
                        coverage=frozenset(subtable.Coverage.glyphs),
                        first_classes=subtable.ClassDef1.classDefs if subtable.ClassDef1 else {},
                        second_classes=subtable.ClassDef2.classDefs if subtable.ClassDef2 else {},
                        records=subtable.Class1Record,
                    )
                )

    @property
    def empty(self) -> bool:
        """True when the font has no GPOS pair kerning at all."""
        return not self._pairs and not self._class_pairs

    def design_units(self, left: str, right: str) -> int:
        """Adjustment between two characters in font design units."""
        left_glyph = self._cmap.get(ord(left))
        right_glyph = self._cmap.get(ord(right))
        if left_glyph is None or right_glyph is None:
            return 0
        total = self._pairs.get((left_glyph, right_glyph), 0)
        for table in self._class_pairs:
            total += table.x_advance(left_glyph, right_glyph)
        return total

    def kerning(self, left: str, right: str, size: float) -> int:
        """Adjustment between two characters in 26.6 fixed point at ``size``."""
        units = self.design_units(left, right)
        if not units:
            return 0
        return float_to_fixed_26_6(units * size / self._units_per_em)


def load_gpos_kerning(path: str | Path) -> GposKerning | None:
    """Read GPOS kerning from a font file.

    Returns:
        The kerning data, or None when fontTools cannot read the file or
        it has no GPOS pair kerning
    """
    try:
        font = TTFont(str(path))
    except (TTLibError, OSError) as e:
        logger.debug("no GPOS kerning for %s: %s", path, e)
        return None
    try:
        kerning = GposKerning.from_font(font)
    finally:
        font.close()

    if kerning.empty:
        logger.debug("no GPOS kerning for %s", path)
        return None
    logger.debug("using GPOS kerning for %s", path)
    return kerning
