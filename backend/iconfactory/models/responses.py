"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iconfactory.models.icon import Icon, IconCollection


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class AIServiceInfo(BaseModel):
    configured: bool
    provider: str = "anthropic"
    model: str


class AIHealthResponse(BaseModel):
    status: str = "OK"
    ai_service: AIServiceInfo
    timestamp: str


class GenerateData(BaseModel):
    prompt: str
    style: str
    count: int
    icons: list[Icon]
    generated_at: str
    extraction: str = "strict"


class GenerateResponse(BaseModel):
    success: bool = True
    data: GenerateData


class CollectionResponse(BaseModel):
    success: bool = True
    data: IconCollection


class LibraryData(BaseModel):
    collections: list[IconCollection] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    pages: int = 0


class LibraryResponse(BaseModel):
    success: bool = True
    data: LibraryData


class DeleteData(BaseModel):
    message: str = "Collection deleted successfully"
    deleted_collection: IconCollection


class DeleteResponse(BaseModel):
    success: bool = True
    data: DeleteData


class ValidationData(BaseModel):
    is_valid: bool
    size: int
    element_count: int


class ValidateResponse(BaseModel):
    success: bool = True
    data: ValidationData


class EditResponse(BaseModel):
    success: bool = True
    data: Icon
