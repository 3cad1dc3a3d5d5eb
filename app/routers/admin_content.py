# Authoring endpoints behind the admin session cookie.
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Response, UploadFile
from sqlalchemy.exc import SQLAlchemyError

from app.schemas.content_item import ContentItemCreate, ContentItemUpdate
from app.services.authz import require_admin
from app.services.content import export_filename, export_json, get_static_content, merge_with_static
from app.services.content_repository import (
    ContentNotFoundError,
    ContentRepository,
    ImageFile,
    ImageUploadError,
    get_content_repository,
)
from app.utils.constants import CATEGORIES_BY_TYPE, CONTENT_TYPES, MAX_IMAGE_BYTES

router = APIRouter(
    prefix="/api/admin/content",
    tags=["admin-content"],
    dependencies=[Depends(require_admin)],
)

EXCERPT_LENGTH = 150


def _check_type(content_type: str) -> None:
    if content_type not in CONTENT_TYPES:
        raise HTTPException(status_code=400, detail=f"Invalid type: {content_type}")


def _parse_tags(raw: str) -> list[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]


def _read_image(image: Optional[UploadFile]) -> Optional[ImageFile]:
    if image is None or not image.filename:
        return None

    content_type = (image.content_type or "").lower()
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Please select an image file")

    data = image.file.read(MAX_IMAGE_BYTES + 1)
    if len(data) > MAX_IMAGE_BYTES:
        raise HTTPException(status_code=400, detail="Image size should be less than 5MB")
    if not data:
        raise HTTPException(status_code=400, detail="Image file is empty")

    return ImageFile(content=data, content_type=content_type, filename=image.filename)


def _create(repo: ContentRepository, payload: ContentItemCreate, image_file: Optional[ImageFile] = None):
    try:
        item = repo.create(payload, image_file)
    except ImageUploadError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to create content")
    return {"success": True, "content": item.to_json()}


@router.get("")
def list_remote_content(response: Response, repo: ContentRepository = Depends(get_content_repository)):
    response.headers["Cache-Control"] = "no-store"
    return {"content": [it.to_json() for it in repo.list_remote()]}


@router.post("")
def create_content(payload: ContentItemCreate, repo: ContentRepository = Depends(get_content_repository)):
    required = [payload.type, payload.title, payload.content, payload.excerpt, payload.category, payload.author]
    if not all(v.strip() for v in required):
        raise HTTPException(status_code=400, detail="Missing required fields")
    _check_type(payload.type)

    return _create(repo, payload)


@router.post("/upload")
def create_content_with_image(
    type: str = Form(""),
    title: str = Form(""),
    content: str = Form(""),
    excerpt: str = Form(""),
    category: str = Form(""),
    tags: str = Form(""),
    author: str = Form(""),
    image_url: str = Form("", alias="imageUrl"),
    image: Optional[UploadFile] = File(None),
    repo: ContentRepository = Depends(get_content_repository),
):
    """
    Multipart variant of the write endpoint used by the authoring form.

    Missing excerpt falls back to the start of the body, missing category to
    the first category offered for the type. An uploaded image wins over
    imageUrl.
    """
    if not all(v.strip() for v in (type, title, content, author)):
        raise HTTPException(status_code=400, detail="Missing required fields")
    _check_type(type)

    payload = ContentItemCreate(
        type=type,
        title=title,
        content=content,
        excerpt=excerpt or f"{content[:EXCERPT_LENGTH]}...",
        category=category or CATEGORIES_BY_TYPE[type][0],
        tags=_parse_tags(tags),
        author=author,
        image_url=image_url,
    )
    return _create(repo, payload, _read_image(image))


@router.get("/export")
def export_content(repo: ContentRepository = Depends(get_content_repository)):
    items = merge_with_static(repo.list_remote(), get_static_content())
    return Response(
        content=export_json(items),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@router.get("/{content_id}")
def get_content(content_id: str, repo: ContentRepository = Depends(get_content_repository)):
    item = repo.get_remote(content_id)
    if not item:
        raise HTTPException(status_code=404, detail="Content not found")
    return {"content": item.to_json()}


@router.patch("/{content_id}")
def update_content(
    content_id: str,
    type: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    excerpt: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    published: Optional[bool] = Form(None),
    delete_old_image: bool = Form(False),
    image: Optional[UploadFile] = File(None),
    repo: ContentRepository = Depends(get_content_repository),
):
    fields = {
        "type": type,
        "title": title,
        "content": content,
        "excerpt": excerpt,
        "category": category,
        "author": author,
        "image_url": image_url,
        "published": published,
    }
    fields = {k: v for k, v in fields.items() if v is not None}
    if tags is not None:
        fields["tags"] = _parse_tags(tags)
    if "type" in fields:
        _check_type(fields["type"])

    image_file = _read_image(image)

    try:
        item = repo.update(content_id, ContentItemUpdate(**fields), image_file, delete_old_image)
    except ContentNotFoundError:
        raise HTTPException(status_code=404, detail="Content not found")
    except ImageUploadError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to update content")

    return {"success": True, "content": item.to_json()}


@router.delete("/{content_id}")
def delete_content(
    content_id: str,
    confirm: bool = Query(False, description="Must be true; the list view asks before deleting"),
    repo: ContentRepository = Depends(get_content_repository),
):
    if not confirm:
        raise HTTPException(status_code=400, detail="Deletion must be confirmed")

    try:
        deleted = repo.delete(content_id)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to delete content")

    if not deleted:
        raise HTTPException(status_code=404, detail="Content not found")
    return {"success": True}
