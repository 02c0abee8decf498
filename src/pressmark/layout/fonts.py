"""Font resources for layout.

The layout model only needs two things from a font: its embedded
PostScript name and per-pair kerning in 26.6 fixed point. FontSource
states that contract; FreetypeFont fulfils it by delegating to FreeType
through freetype-py. Fonts without a legacy ``kern`` table fall back to
their GPOS pair kerning, read with fontTools.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

import freetype

from pressmark.errors import ResourceError
from pressmark.layout.fixed import float_to_fixed_26_6
from pressmark.layout.gpos import GposKerning, load_gpos_kerning
from pressmark.utils.logger import get_logger
from pressmark.utils.text import clean_ps_name

logger = get_logger(__name__)


@runtime_checkable
class FontSource(Protocol):
    """Protocol for fonts the layout model can query.

    Implementations must be deterministic: the same pair always yields
    the same adjustment.

    """

    @property
    def postscript_name(self) -> str:
        """The font's embedded PostScript name."""
        ...

    def kerning(self, left: str, right: str) -> int:
        """Horizontal adjustment between two characters.

        Args:
            left: Character on the left
            right: Character on the right

        Returns:
            Adjustment in 26.6 fixed point, at the size the font was loaded at
        """
        ...


class FreetypeFont:
    """FontSource backed by a FreeType face.

    The face is scaled to ``size`` points at 72 dpi, so one pixel is one
    PostScript point and kerning comes back in points. ``gpos`` supplies
    the kerning when the face has no legacy ``kern`` table.

    """

    __slots__ = ("_face", "_path", "_size", "_gpos")

    def __init__(
        self,
        face: freetype.Face,
        path: str,
        size: float,
        gpos: GposKerning | None = None,
    ) -> None:
        self._face = face
        self._path = path
        self._size = size
        self._gpos = gpos
        fixed = float_to_fixed_26_6(size)
        face.set_char_size(fixed, fixed, 72, 72)

    @property
    def path(self) -> str:
        return self._path

    @property
    def postscript_name(self) -> str:
        """Embedded PostScript name, reduced to a valid name token.

        Falls back to the family name, then the file name, when a
        candidate has nothing usable. Empty when all three are unusable.
        """
        face = self._face
        for candidate in (face.postscript_name, face.family_name, Path(self._path).stem):
            if isinstance(candidate, bytes):
                candidate = candidate.decode("ascii", errors="ignore")
            name = clean_ps_name(candidate or "")
            if name:
                return name
        return ""

    @property
    def has_kerning(self) -> bool:
        return bool(self._face.has_kerning) or self._gpos is not None

    def kerning(self, left: str, right: str) -> int:
        face = self._face
        if not face.has_kerning:
            if self._gpos is None:
                return 0
            return self._gpos.kerning(left, right, self._size)
        left_index = face.get_char_index(left)
        right_index = face.get_char_index(right)
        if not left_index or not right_index:
            return 0
        vector = face.get_kerning(left_index, right_index, freetype.FT_KERNING_UNFITTED)
        return vector.x


def load_font(path: str | Path, size: float) -> FreetypeFont:
    """Load a TrueType/OpenType font for kerning lookups.

    Args:
        path: Font file
        size: Size in points the kerning values are measured at

    Returns:
        A FreetypeFont scaled to ``size``, kerning from the legacy ``kern``
        table or else from GPOS

    Raises:
        ResourceError: If the file cannot be opened or parsed
    """
    path = str(path)
    try:
        face = freetype.Face(path)
        gpos = None if face.has_kerning else load_gpos_kerning(path)
        font = FreetypeFont(face, path, size, gpos)
    except (freetype.FT_Exception, OSError) as e:
        raise ResourceError(path, f"cannot load font: {e}") from e

    logger.debug(
        "loaded font %s (%s), kerning %s",
        path,
        font.postscript_name,
        "available" if font.has_kerning else "absent",
    )
    return font
