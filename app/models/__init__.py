from app.models.content_item import ContentItem
