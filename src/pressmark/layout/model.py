"""Page geometry, typographic constants and kerning.

The LayoutModel is built once per run from a LayoutConfig and an optional
font. All typographic constants are fixed ratios of the body and heading
sizes. Kerning lookups are memoized per ordered character pair and the
cache is what the renderer serializes into the preamble.

Thread Safety:
The kerning cache is mutable. Build and render a model from one thread.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from pressmark.config import LayoutConfig, get_layout_config
from pressmark.layout.fixed import fixed_26_6_to_float
from pressmark.layout.fonts import FontSource
from pressmark.utils.logger import get_logger
from pressmark.utils.text import clean_ps_name

logger = get_logger(__name__)

LINE_SPACE_RATIO = 1.25
HEAD_PAD_RATIO = 3.0

type KernPair = tuple[str, str]


@dataclass(slots=True)
class LayoutModel:
    """Geometry and font metrics for one document.

    Usage:
            >>> model = LayoutModel.from_config(LayoutConfig())
            >>> model.line_space, model.body_pad, model.head_pad
            (15.0, 18.0, 39.0)
            >>> model.right_margin
            540

    """

    page_width: float
    page_height: float
    vertical_margin: float
    horizontal_margin: float
    font_name: str
    body_size: float
    body_pad: float
    line_space: float
    head_size: float
    head_pad: float
    font: FontSource | None = field(default=None, repr=False)
    kern_cache: dict[KernPair, float] = field(default_factory=dict, repr=False)

    @classmethod
    def from_config(cls, config: LayoutConfig | None = None, font: FontSource | None = None) -> LayoutModel:
        """Build a model from static configuration and an optional font.

        Args:
            config: Layout settings (defaults to the active context config)
            font: Loaded font; its PostScript name overrides config.font_name
                unless nothing of it survives as a PostScript name token
        """
        if config is None:
            config = get_layout_config()

        font_name = config.font_name
        if font is not None:
            font_name = clean_ps_name(font.postscript_name) or font_name

        return cls(
            page_width=config.page_width,
            page_height=config.page_height,
            vertical_margin=config.vertical_margin,
            horizontal_margin=config.horizontal_margin,
            font_name=font_name,
            body_size=config.body_size,
            body_pad=config.body_size * config.body_pad_ratio,
            line_space=config.body_size * LINE_SPACE_RATIO,
            head_size=config.head_size,
            head_pad=config.head_size * HEAD_PAD_RATIO,
            font=font,
        )

    # =========================================================================
    # Derived geometry
    # =========================================================================

    @property
    def left_margin(self) -> float:
        return self.horizontal_margin

    @property
    def right_margin(self) -> float:
        return self.page_width - self.horizontal_margin

    @property
    def bottom_margin(self) -> float:
        return self.vertical_margin

    @property
    def top_margin(self) -> float:
        return self.page_height - self.vertical_margin

    # =========================================================================
    # Kerning
    # =========================================================================

    def kerning(self, left: str, right: str) -> float:
        """Horizontal adjustment in points between two characters.

        The first lookup of a pair asks the font; later lookups hit the
        cache. Without a font every pair is 0 and nothing is cached.
        """
        pair = (left, right)
        cached = self.kern_cache.get(pair)
        if cached is not None:
            return cached
        if self.font is None:
            return 0.0

        value = fixed_26_6_to_float(self.font.kerning(left, right))
        self.kern_cache[pair] = value
        return value

    def populate_kerning(self, charset: str | None = None) -> int:
        """Look up every ordered pair of ``charset``.

        Args:
            charset: Characters to pair (defaults to the active config's
                kern_charset)

        Returns:
            Number of pairs with a non-zero adjustment
        """
        if self.font is None:
            return 0
        if charset is None:
            charset = get_layout_config().kern_charset

        chars = sorted(set(charset))
        for left in chars:
            for right in chars:
                self.kerning(left, right)

        kerned = sum(1 for v in self.kern_cache.values() if v != 0)
        logger.debug("kerning: %d of %d pairs non-zero", kerned, len(self.kern_cache))
        return kerned

    def kerning_table(self) -> list[tuple[KernPair, float]]:
        """Non-zero cached pairs, sorted by pair."""
        return sorted((pair, v) for pair, v in self.kern_cache.items() if v != 0)

    @property
    def has_kerning(self) -> bool:
        return any(v != 0 for v in self.kern_cache.values())
