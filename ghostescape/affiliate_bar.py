"""Small bars, such as health bars, drawn on a parent object."""

from __future__ import annotations

from typing import Any, Sequence

from .defs import Anchor, Color
from .object_affiliate import ObjectAffiliate


class AffiliateBar(ObjectAffiliate):
    """A horizontal bar whose colour depends on how full it is."""

    def __init__(self) -> None:
        super().__init__()
        self.percentage = 1.0
        self.color_high = Color(0.0, 1.0, 0.0, 1.0)
        self.color_mid = Color(1.0, 0.65, 0.0, 1.0)
        self.color_low = Color(1.0, 0.0, 0.0, 1.0)

    @property
    def current_color(self) -> Color:
        """Colour for the current fill: high above 70%, mid above 30%, else low."""
        if self.percentage > 0.7:
            return self.color_high
        if self.percentage > 0.3:
            return self.color_mid
        return self.color_low

    def render(self) -> None:
        pos = self.parent.render_position + self.offset
        self.game.render_hbar(pos, self._size, self.percentage, self.current_color)


def add_affiliate_bar_child(parent: Any, size: Sequence[float], anchor: Anchor = Anchor.CENTER) -> AffiliateBar:
    """Create a bar of ``size`` and attach it to ``parent``."""
    bar = AffiliateBar()
    bar.init()
    bar.anchor = anchor
    bar.set_size(size)
    if parent is not None:
        bar.parent = parent
        parent.add_child(bar)
    return bar