"""Tests for export helpers."""

from __future__ import annotations

import io

import pytest

from iconfactory.errors import MalformedMarkupError
from iconfactory.models.icon import Icon
from iconfactory.svg.export import (
    combine_for_export,
    icon_file_name,
    render_bitmap,
    slugify,
    svg_from_data_url,
    svg_to_data_url,
)
from tests.conftest import FILLED_RECT_SVG, SMILEY_SVG

try:
    import cairosvg  # noqa: F401

    HAS_CAIRO = True
except (ImportError, OSError):
    HAS_CAIRO = False

needs_cairo = pytest.mark.skipif(not HAS_CAIRO, reason="cairosvg / libcairo not available")


def test_svg_export_is_passthrough():
    assert render_bitmap(SMILEY_SVG, "svg", 32) == SMILEY_SVG.encode("utf-8")


def test_invalid_markup_never_exported():
    with pytest.raises(MalformedMarkupError):
        render_bitmap("<svg>", "png", 32)


@needs_cairo
def test_png_export_size():
    from PIL import Image

    png = render_bitmap(FILLED_RECT_SVG, "png", 48)
    assert png.startswith(b"\x89PNG")
    assert Image.open(io.BytesIO(png)).size == (48, 48)


@needs_cairo
def test_jpg_export_is_opaque():
    from PIL import Image

    jpg = render_bitmap(SMILEY_SVG, "jpg", 64)
    img = Image.open(io.BytesIO(jpg))
    assert img.format == "JPEG"
    assert img.mode == "RGB"
    assert img.size == (64, 64)


def test_combine_for_export():
    icons = [
        Icon(name="smile", description="", svg=SMILEY_SVG, category="ui"),
        Icon(name="blocks", description="", svg=FILLED_RECT_SVG, category="ui"),
    ]
    text = combine_for_export(icons)
    first, second = text.split("\n\n")
    assert first.startswith("<!-- smile -->\n<svg ")
    assert second.startswith("<!-- blocks -->\n<svg ")
    assert "\n" not in first.split("\n", 1)[1]


def test_combine_rejects_invalid():
    with pytest.raises(MalformedMarkupError):
        combine_for_export([Icon(name="x", description="", svg="<svg>", category="ui")])


def test_data_url():
    url = svg_to_data_url(SMILEY_SVG)
    assert url.startswith("data:image/svg+xml,%3Csvg")
    assert svg_from_data_url(url) == SMILEY_SVG
    assert svg_from_data_url("data:image/png;base64,AAAA") == ""


def test_icon_file_name():
    assert icon_file_name("Settings Gear!", 0) == "settings-gear-1"
    assert icon_file_name("  home  ", 2) == "home-3"


def test_slugify():
    assert slugify("My Icon!") == "my-icon"
    assert slugify('a"b\r\nc') == "ab-c"
    assert slugify("???") == ""
