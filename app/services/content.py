from __future__ import annotations

import json
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from app.schemas.content_item import ContentItemOut
from app.utils.constants import STATIC_ID_PREFIX

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
STATIC_CONTENT_PATH = DATA_DIR / "content.json"


def namespace_static_id(content_id: str) -> str:
    if content_id.startswith(STATIC_ID_PREFIX):
        return content_id
    return f"{STATIC_ID_PREFIX}{content_id}"


def load_static_content(path: Path | str = STATIC_CONTENT_PATH) -> tuple[ContentItemOut, ...]:
    """
    Read the content bundle shipped with the site.

    Ids are namespaced with ``static-`` so they can never collide with the
    generated ids of authored rows. A tuple is returned; the bundle is never
    mutated at runtime.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    items = []
    for entry in raw:
        item = ContentItemOut.model_validate(entry)
        items.append(item.model_copy(update={"id": namespace_static_id(item.id)}))
    return tuple(items)


@lru_cache(maxsize=1)
def get_static_content() -> tuple[ContentItemOut, ...]:
    return load_static_content()


def merge_with_static(remote: Iterable[ContentItemOut], static: Iterable[ContentItemOut]) -> list[ContentItemOut]:
    # no de-duplication; ids are disjoint by construction
    merged = [*remote, *static]
    merged.sort(key=lambda item: item.created_at, reverse=True)
    return merged


def filter_by_type(items: Iterable[ContentItemOut], content_type: str) -> list[ContentItemOut]:
    return [item for item in items if item.type == content_type]


def filter_by_category(items: list[ContentItemOut], category: Optional[str]) -> list[ContentItemOut]:
    if not category:
        return items
    return [item for item in items if item.category == category]


def filter_published(items: Iterable[ContentItemOut]) -> list[ContentItemOut]:
    return [item for item in items if item.published]


def find_by_id(items: Iterable[ContentItemOut], content_id: str) -> Optional[ContentItemOut]:
    return next((item for item in items if item.id == content_id), None)


def export_filename(today: Optional[date] = None) -> str:
    return f"content-{(today or date.today()).isoformat()}.json"


def export_json(items: Iterable[ContentItemOut]) -> str:
    return json.dumps([item.to_json() for item in items], indent=2, ensure_ascii=False)
