"""Prompt templates for icon set generation."""

from __future__ import annotations

STYLE_HINTS = {
    "modern": "clean geometric shapes, even stroke weights, rounded joins",
    "classic": "traditional pictograms with solid fills and strong silhouettes",
    "minimal": "as few elements as possible, thin outlines, generous negative space",
    "detailed": "richer detail with several layered shapes, still readable at 24px",
}

_ICON_SET_TEMPLATE = """You are a professional SVG icon designer. Generate high quality, modern SVG icons from the user's description.

REQUIREMENTS:
1. Generate {count} related SVG icon variants.
2. Every icon must be simple, clear and modern.
3. Use flat solid colors suitable for UI use.
4. Keep the SVG code small: use path, circle, rect and other basic elements.
5. Use a 24x24 or 32x32 viewBox.
6. Give each icon a short description.

STYLE: {style}

Return ONLY JSON in this exact shape, with no markdown fences and no commentary:
{{
  "icons": [
    {{
      "name": "icon name",
      "description": "icon description",
      "svg": "<svg ...>...</svg>",
      "category": "category"
    }}
  ]
}}"""

_USER_TEMPLATE = "Generate an SVG icon set for the following description: {prompt}"


def get_system_prompt(style: str, count: int) -> str:
    style_text = STYLE_HINTS.get(style, style) if style else STYLE_HINTS["modern"]
    return _ICON_SET_TEMPLATE.format(count=count, style=style_text)


def get_user_prompt(prompt: str) -> str:
    return _USER_TEMPLATE.format(prompt=prompt)


def get_all_templates() -> dict[str, str]:
    return {"icon_set": _ICON_SET_TEMPLATE, "user": _USER_TEMPLATE}
