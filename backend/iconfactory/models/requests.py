"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from iconfactory.models.icon import Icon


class StyleOption(BaseModel):
    value: str = Field(..., description="Style key, e.g. modern, classic, minimal, detailed")
    desc: str = Field(..., description="Human readable style description")
    label: str | None = None


class GenerateRequest(BaseModel):
    prompt: str = Field(..., min_length=3, max_length=500, description="Description of the icon set")
    style: StyleOption
    count: int = Field(default=6, ge=1, le=8, description="Number of icons to return")


class SaveCollectionRequest(BaseModel):
    icons: list[Icon] = Field(..., description="Icons to save, in display order")
    collection_name: str = Field(default="Untitled Collection")


class ValidateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class EditRequest(BaseModel):
    icon: Icon
    color: str | None = Field(default=None, description="New color, e.g. #ff0000")
    size: int | None = Field(default=None, ge=16, le=128, description="New width/height in px")
    stroke_width: float | None = Field(default=None, ge=0, le=8)
    svg_code: str | None = Field(default=None, description="Hand-edited markup replacing the icon's")
    name: str | None = None
    description: str | None = None


class ExportRequest(BaseModel):
    svg: str = Field(..., description="Validated SVG code")
    format: Literal["svg", "png", "jpg"] = "svg"
    size: Literal[16, 24, 32, 48, 64, 128, 256] = 32
    filename: str = "icon"


class ExportBundleRequest(BaseModel):
    icons: list[Icon]
