"""Export helpers — bitmap rendering, data URLs, combined multi-icon text."""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Iterable
from typing import Literal
from urllib.parse import quote, unquote

from iconfactory.errors import MalformedMarkupError
from iconfactory.models.icon import Icon
from iconfactory.svg.normalizer import normalize
from iconfactory.svg.validator import is_valid_svg

logger = logging.getLogger(__name__)

ExportFormat = Literal["svg", "png", "jpg"]
MEDIA_TYPES = {"svg": "image/svg+xml", "png": "image/png", "jpg": "image/jpeg"}

_JPEG_QUALITY = 95
_DATA_URL_RE = re.compile(r"data:image/svg\+xml,(.*)", re.DOTALL)


def _require_valid(svg: str) -> None:
    if not is_valid_svg(svg):
        raise MalformedMarkupError("Refusing to export invalid SVG", markup=svg)


def render_bitmap(svg: str, fmt: ExportFormat = "png", size: int = 32) -> bytes:
    """Render validated markup to ``fmt`` at ``size``×``size`` pixels.

    ``svg`` returns the markup itself as UTF-8. JPEG has no alpha, so the
    PNG render is flattened onto white first.
    """
    _require_valid(svg)
    if fmt == "svg":
        return svg.encode("utf-8")

    import cairosvg

    png = cairosvg.svg2png(bytestring=svg.encode("utf-8"), output_width=size, output_height=size)
    if fmt == "png":
        return png

    from PIL import Image

    img = Image.open(io.BytesIO(png)).convert("RGBA")
    background = Image.new("RGB", img.size, (255, 255, 255))
    background.paste(img, mask=img.split()[3])
    buf = io.BytesIO()
    background.save(buf, format="JPEG", quality=_JPEG_QUALITY)
    return buf.getvalue()


def combine_for_export(icons: Iterable[Icon]) -> str:
    """One text blob with a ``<!-- name -->`` header above each normalized icon."""
    parts = []
    for icon in icons:
        _require_valid(icon.svg)
        parts.append(f"<!-- {icon.name} -->\n{normalize(icon.svg)}")
    return "\n\n".join(parts)


def svg_to_data_url(svg: str) -> str:
    return f"data:image/svg+xml,{quote(svg, safe='')}"


def svg_from_data_url(data_url: str) -> str:
    """Markup from an ``image/svg+xml`` data URL, or "" when it is not one."""
    m = _DATA_URL_RE.match(data_url or "")
    if not m:
        return ""
    return unquote(m.group(1))


def slugify(text: str) -> str:
    """Lowercase file-name slug: ``"My Icon!"`` -> ``my-icon``."""
    base = re.sub(r"[^a-z0-9\s-]", "", text.lower())
    return re.sub(r"\s+", "-", base).strip("-")


def icon_file_name(description: str, index: int) -> str:
    """Slug used as a download file name: ``"Gear Icon!", 0`` -> ``gear-icon-1``."""
    return f"{slugify(description)}-{index + 1}"
