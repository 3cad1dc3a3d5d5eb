import json
from functools import lru_cache

from fastapi import APIRouter, HTTPException

from app.schemas.page import PageOut
from app.services.content import DATA_DIR

router = APIRouter(prefix="/pages", tags=["pages"])


@lru_cache(maxsize=1)
def load_pages() -> dict[str, PageOut]:
    raw = json.loads((DATA_DIR / "pages.json").read_text(encoding="utf-8"))
    return {slug: PageOut.model_validate(page) for slug, page in raw.items()}


@router.get("")
def list_pages():
    return [{"slug": p.slug, "title": p.title} for p in load_pages().values()]


@router.get("/{slug}", response_model=PageOut)
def get_page(slug: str):
    page = load_pages().get(slug)
    if not page:
        raise HTTPException(status_code=404, detail="Page not found")
    return page
