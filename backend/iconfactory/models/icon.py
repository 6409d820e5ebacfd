"""Icon records: candidates from the model, sanitized icons, edit state, collections."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


def new_id() -> str:
    return uuid.uuid4().hex[:12]


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CandidateIcon(BaseModel):
    """An unsanitized record pulled out of a model response.

    Fields are whatever the model produced: any of them may be missing or of
    the wrong type.
    """

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    description: Any = None
    svg: Any = None
    category: Any = None


class Icon(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)
    name: str
    description: str
    svg: str
    category: str
    is_edited: bool = Field(default=False, alias="isEdited")


class EditableIcon(Icon):
    """Icon plus working state owned by a single edit session (never persisted)."""

    selected_color: str = "#000000"
    selected_size: int = 32
    stroke_width: float = 2

    def to_icon(self, is_edited: bool = True) -> Icon:
        return Icon(
            id=self.id,
            name=self.name,
            description=self.description,
            svg=self.svg,
            category=self.category,
            is_edited=is_edited,
        )


class IconCollection(BaseModel):
    """A saved, ordered set of icons. Immutable once created; only whole removal."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str = "Untitled Collection"
    icons: list[Icon] = Field(default_factory=list)
    created_at: str = Field(default_factory=utc_now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def icon_count(self) -> int:
        return len(self.icons)
