"""Interactive edit session over a single icon.

The session owns an EditableIcon. Every mutation is checked against the
Validator before it is applied; a rejected edit raises MalformedMarkupError
and the prior markup stays in place.
"""

from __future__ import annotations

import logging

from iconfactory.errors import MalformedMarkupError
from iconfactory.models.icon import EditableIcon, Icon
from iconfactory.svg.rewriter import set_color, set_size, set_stroke_width
from iconfactory.svg.validator import is_valid_svg

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#000000"
DEFAULT_SIZE = 32
DEFAULT_STROKE_WIDTH = 2


class EditSession:
    def __init__(self, icon: Icon) -> None:
        self.original = icon
        self.icon = self._editable(icon)

    @staticmethod
    def _editable(icon: Icon) -> EditableIcon:
        return EditableIcon(
            **icon.model_dump(),
            selected_color=DEFAULT_COLOR,
            selected_size=DEFAULT_SIZE,
            stroke_width=DEFAULT_STROKE_WIDTH,
        )

    @property
    def svg(self) -> str:
        return self.icon.svg

    def _apply(self, new_svg: str, **state) -> str:
        if not is_valid_svg(new_svg):
            logger.warning("Edit rejected for icon %s: result is not valid SVG", self.icon.id)
            raise MalformedMarkupError("Edit would produce invalid SVG", markup=new_svg)
        self.icon = self.icon.model_copy(update={"svg": new_svg, **state})
        return new_svg

    def change_color(self, color: str) -> str:
        return self._apply(set_color(self.icon.svg, color), selected_color=color)

    def change_size(self, size: int) -> str:
        return self._apply(set_size(self.icon.svg, size), selected_size=size)

    def change_stroke_width(self, width: float) -> str:
        return self._apply(set_stroke_width(self.icon.svg, width), stroke_width=width)

    def replace_code(self, svg_code: str) -> str:
        """Swap in hand-edited markup."""
        return self._apply(svg_code)

    def rename(self, name: str | None = None, description: str | None = None) -> None:
        update = {}
        if name is not None:
            update["name"] = name
        if description is not None:
            update["description"] = description
        if update:
            self.icon = self.icon.model_copy(update=update)

    def reset(self) -> None:
        self.icon = self._editable(self.original)

    def commit(self) -> Icon:
        """Fold the session back into a canonical Icon marked as edited."""
        if not is_valid_svg(self.icon.svg):
            raise MalformedMarkupError("Invalid SVG code. Please check the syntax.", markup=self.icon.svg)
        return self.icon.to_icon(is_edited=True)
