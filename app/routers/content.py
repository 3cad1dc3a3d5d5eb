from fastapi import APIRouter, Depends, HTTPException, Response

from app.services.content import (
    filter_by_category,
    filter_by_type,
    filter_published,
    find_by_id,
    get_static_content,
    merge_with_static,
)
from app.services.content_repository import ContentRepository, get_content_repository
from app.utils.constants import CATEGORIES_BY_TYPE, CONTENT_TYPES, SERVICE_CATEGORIES, TYPE_LABELS

router = APIRouter(prefix="/content", tags=["content"])

# listings must reflect writes made from other tabs/sessions on refetch
NO_STORE = "no-store"


def all_content(repo: ContentRepository):
    return merge_with_static(repo.list_remote(), get_static_content())


@router.get("")
def list_content(
    response: Response,
    type: str | None = None,
    category: str | None = None,
    repo: ContentRepository = Depends(get_content_repository),
):
    items = filter_published(all_content(repo))

    if type:
        if type not in CONTENT_TYPES:
            raise HTTPException(status_code=400, detail=f"Invalid type: {type}")
        items = filter_by_type(items, type)

    items = filter_by_category(items, category or "")

    response.headers["Cache-Control"] = NO_STORE
    return {
        "title": TYPE_LABELS.get(type or "", "All Content"),
        "content": [it.to_json() for it in items],
    }


@router.get("/categories")
def categories():
    return {
        "byType": CATEGORIES_BY_TYPE,
        "filters": SERVICE_CATEGORIES,
        "labels": TYPE_LABELS,
    }


@router.get("/view/{content_id}")
def view_content(content_id: str, response: Response, repo: ContentRepository = Depends(get_content_repository)):
    item = find_by_id(all_content(repo), content_id)
    if not item or not item.published:
        raise HTTPException(status_code=404, detail="Content not found")

    response.headers["Cache-Control"] = NO_STORE
    return {"content": item.to_json()}
