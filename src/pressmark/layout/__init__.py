"""Page layout and font metrics.

Architecture:
layout/
├── __init__.py          # Re-exports
├── fixed.py             # 26.6 fixed-point conversion
├── fonts.py             # FontSource protocol, FreeType-backed fonts
├── gpos.py              # OpenType GPOS pair kerning via fontTools
└── model.py             # LayoutModel: geometry, constants, kerning cache

"""

from pressmark.layout.fixed import fixed_26_6_to_float, float_to_fixed_26_6
from pressmark.layout.fonts import FontSource, FreetypeFont, load_font
from pressmark.layout.gpos import GposKerning, load_gpos_kerning
from pressmark.layout.model import LayoutModel

__all__ = [
    "FontSource",
    "FreetypeFont",
    "GposKerning",
    "LayoutModel",
    "fixed_26_6_to_float",
    "float_to_fixed_26_6",
    "load_font",
    "load_gpos_kerning",
]
