"""SVG validation, normalization and tag-scoped attribute rewriting."""

from iconfactory.svg.normalizer import normalize
from iconfactory.svg.rewriter import set_color, set_size, set_stroke_width
from iconfactory.svg.validator import count_elements, is_valid_svg, validation_report

__all__ = [
    "count_elements",
    "is_valid_svg",
    "normalize",
    "set_color",
    "set_size",
    "set_stroke_width",
    "validation_report",
]
