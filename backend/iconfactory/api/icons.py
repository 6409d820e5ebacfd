"""/api/icons/* — validation, server-side editing, export and saved collections."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse, Response

from iconfactory.dependencies import get_collection_store
from iconfactory.editing.session import EditSession
from iconfactory.errors import CollectionNotFoundError, MalformedMarkupError
from iconfactory.models.requests import (
    EditRequest,
    ExportBundleRequest,
    ExportRequest,
    SaveCollectionRequest,
    ValidateRequest,
)
from iconfactory.models.responses import (
    CollectionResponse,
    DeleteData,
    DeleteResponse,
    EditResponse,
    LibraryData,
    LibraryResponse,
    ValidateResponse,
    ValidationData,
)
from iconfactory.store.collections import CollectionStore
from iconfactory.svg.export import MEDIA_TYPES, combine_for_export, render_bitmap, slugify
from iconfactory.svg.normalizer import normalize
from iconfactory.svg.validator import is_valid_svg, validation_report

router = APIRouter(prefix="/icons")
logger = logging.getLogger(__name__)


@router.post("/validate", response_model=ValidateResponse)
async def validate(req: ValidateRequest) -> ValidateResponse:
    return ValidateResponse(data=ValidationData(**validation_report(req.svg)))


@router.post("/edit", response_model=EditResponse)
async def edit(req: EditRequest) -> EditResponse:
    """Apply one edit session (code, color, size, stroke width) and return the edited icon.

    The first rejected step aborts the whole edit: nothing is returned but the error.
    """
    session = EditSession(req.icon)
    try:
        if req.svg_code is not None:
            session.replace_code(req.svg_code)
        if req.color is not None:
            session.change_color(req.color)
        if req.size is not None:
            session.change_size(req.size)
        if req.stroke_width is not None:
            session.change_stroke_width(req.stroke_width)
        session.rename(req.name, req.description)
        icon = session.commit()
    except MalformedMarkupError as e:
        raise HTTPException(status_code=422, detail=f"MalformedMarkup: {e}") from e
    return EditResponse(data=icon)


@router.post("/export")
async def export(req: ExportRequest) -> Response:
    try:
        content = await run_in_threadpool(render_bitmap, req.svg, req.format, req.size)
    except MalformedMarkupError as e:
        raise HTTPException(status_code=422, detail=f"MalformedMarkup: {e}") from e
    stem = slugify(req.filename) or "icon"
    return Response(
        content=content,
        media_type=MEDIA_TYPES[req.format],
        headers={"Content-Disposition": f'attachment; filename="{stem}.{req.format}"'},
    )


@router.post("/export/bundle", response_class=PlainTextResponse)
async def export_bundle(req: ExportBundleRequest) -> str:
    if not req.icons:
        raise HTTPException(status_code=400, detail="No icons selected")
    try:
        return combine_for_export(req.icons)
    except MalformedMarkupError as e:
        raise HTTPException(status_code=422, detail=f"MalformedMarkup: {e}") from e


@router.post("/save", response_model=CollectionResponse)
async def save(
    req: SaveCollectionRequest,
    store: CollectionStore = Depends(get_collection_store),
) -> CollectionResponse:
    invalid = [icon.name for icon in req.icons if not is_valid_svg(icon.svg)]
    if invalid:
        raise HTTPException(status_code=422, detail=f"MalformedMarkup in icons: {', '.join(invalid)}")

    icons = [icon.model_copy(update={"svg": normalize(icon.svg)}) for icon in req.icons]
    collection = store.save(req.collection_name, icons)
    return CollectionResponse(data=collection)


@router.get("/library", response_model=LibraryResponse)
async def library(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    store: CollectionStore = Depends(get_collection_store),
) -> LibraryResponse:
    result = store.list(page=page, limit=limit)
    return LibraryResponse(
        data=LibraryData(
            collections=result.collections,
            total=result.total,
            page=result.page,
            limit=result.limit,
            pages=result.pages,
        )
    )


@router.get("/{collection_id}", response_model=CollectionResponse)
async def get_collection(
    collection_id: str,
    store: CollectionStore = Depends(get_collection_store),
) -> CollectionResponse:
    try:
        return CollectionResponse(data=store.get(collection_id))
    except CollectionNotFoundError as e:
        logger.warning("Lookup of unknown collection %s", collection_id)
        raise HTTPException(status_code=404, detail="Collection not found") from e


@router.delete("/{collection_id}", response_model=DeleteResponse)
async def delete_collection(
    collection_id: str,
    store: CollectionStore = Depends(get_collection_store),
) -> DeleteResponse:
    try:
        deleted = store.delete(collection_id)
    except CollectionNotFoundError as e:
        logger.warning("Delete of unknown collection %s", collection_id)
        raise HTTPException(status_code=404, detail="Collection not found") from e
    return DeleteResponse(data=DeleteData(deleted_collection=deleted))
