from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from fastapi import Depends
from pydantic import ValidationError
from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.content_item import ContentItem, new_content_id
from app.schemas.content_item import ContentItemCreate, ContentItemOut, ContentItemUpdate
from app.services.spaces_storage import get_image_store
from app.services.tokens import utcnow

logger = logging.getLogger(__name__)

# columns that may not be nulled by a partial update
_NOT_NULL_FIELDS = {"type", "title", "content", "excerpt", "category", "tags", "author", "published"}


class ContentNotFoundError(LookupError):
    pass


class ImageUploadError(RuntimeError):
    pass


class ImageStore(Protocol):
    def upload(self, *, content: bytes, content_type: str, filename: str) -> str: ...

    def delete(self, url: str) -> None: ...


@dataclass
class ImageFile:
    content: bytes
    content_type: str
    filename: str


def row_to_item(row: ContentItem) -> ContentItemOut:
    return ContentItemOut(
        id=row.id,
        type=row.type,
        title=row.title,
        content=row.content,
        excerpt=row.excerpt or "",
        category=row.category or "",
        tags=list(row.tags or []),
        author=row.author or "",
        image_url=row.image_url or "",
        created_at=row.created_at,
        updated_at=row.updated_at,
        published=bool(row.published),
    )


class ContentRepository:
    """
    Data access for authored content: rows in ``content_items`` plus their
    images in the object store.

    Reads degrade to an empty result when the database is unavailable.
    Writes raise. Image removal never blocks a write.
    """

    def __init__(self, db: Session, image_store: ImageStore):
        self.db = db
        self.image_store = image_store

    def list_remote(self) -> list[ContentItemOut]:
        try:
            rows = self.db.execute(
                select(ContentItem).order_by(desc(ContentItem.created_at))
            ).scalars().all()
        except SQLAlchemyError:
            logger.exception("Failed to load remote content, serving none")
            self.db.rollback()
            return []

        items = []
        for r in rows:
            try:
                items.append(row_to_item(r))
            except ValidationError:
                logger.warning("Skipping unreadable content row %s", r.id, exc_info=True)
        return items

    def get_remote(self, content_id: str) -> Optional[ContentItemOut]:
        try:
            row = self.db.get(ContentItem, content_id)
            return row_to_item(row) if row else None
        except (SQLAlchemyError, ValidationError):
            logger.exception("Failed to load remote content %s", content_id)
            self.db.rollback()
            return None

    def create(self, item: ContentItemCreate, image_file: Optional[ImageFile] = None) -> ContentItemOut:
        image_url = item.image_url or ""
        if image_file is not None:
            image_url = self._upload(image_file)

        now = utcnow()
        row = ContentItem(
            id=new_content_id(),
            type=item.type,
            title=item.title,
            content=item.content,
            excerpt=item.excerpt,
            category=item.category,
            tags=list(item.tags),
            author=item.author,
            image_url=image_url or None,
            published=item.published,
            created_at=now,
            updated_at=now,
        )

        try:
            self.db.add(row)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to insert content %r", item.title)
            if image_file is not None:
                self._discard_image(image_url)
            raise

        logger.info("Created %s %s", row.type, row.id)
        return row_to_item(row)

    def update(
        self,
        content_id: str,
        partial: ContentItemUpdate,
        image_file: Optional[ImageFile] = None,
        delete_old_image: bool = False,
    ) -> ContentItemOut:
        row = self.db.get(ContentItem, content_id)
        if row is None:
            raise ContentNotFoundError(content_id)

        fields = {
            k: v
            for k, v in partial.model_dump(exclude_unset=True).items()
            if v is not None or k not in _NOT_NULL_FIELDS
        }

        old_url = row.image_url
        new_upload = None
        if image_file is not None:
            new_upload = fields["image_url"] = self._upload(image_file)

        for name, value in fields.items():
            if name == "tags":
                value = list(value)
            if name == "image_url":
                value = value or None
            setattr(row, name, value)
        row.updated_at = utcnow()

        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to update content %s", content_id)
            if new_upload:
                self._discard_image(new_upload)
            raise

        # the old object goes only once the row no longer references it
        if delete_old_image and old_url and (row.image_url or "") != old_url:
            self._discard_image(old_url)

        logger.info("Updated content %s (%s)", content_id, ", ".join(sorted(fields)) or "no fields")
        return row_to_item(row)

    def delete(self, content_id: str) -> bool:
        row = self.db.get(ContentItem, content_id)
        if row is None:
            return False

        image_url = row.image_url
        try:
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to delete content %s", content_id)
            raise

        if image_url:
            self._discard_image(image_url)

        logger.info("Deleted content %s", content_id)
        return True

    def _upload(self, image_file: ImageFile) -> str:
        try:
            return self.image_store.upload(
                content=image_file.content,
                content_type=image_file.content_type,
                filename=image_file.filename,
            )
        except Exception as e:
            logger.exception("Image upload failed for %s", image_file.filename)
            raise ImageUploadError(f"Failed to upload image: {e}") from e

    def _discard_image(self, url: str) -> None:
        try:
            self.image_store.delete(url)
        except Exception:
            logger.warning("Could not delete image %s", url, exc_info=True)


def get_content_repository(
    db: Session = Depends(get_db),
    image_store: ImageStore = Depends(get_image_store),
) -> ContentRepository:
    return ContentRepository(db, image_store)
