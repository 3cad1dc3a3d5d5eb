"""Tests for merging, filtering and the static content bundle."""

import json
from datetime import date, datetime, timedelta, timezone

import pytest

from app.schemas.content_item import ContentItemOut
from app.services.content import (
    export_filename,
    export_json,
    filter_by_category,
    filter_by_type,
    filter_published,
    find_by_id,
    get_static_content,
    load_static_content,
    merge_with_static,
    namespace_static_id,
)

BASE = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_item(item_id, days=0, type="blog", category="Strategic Planning", published=True):
    return ContentItemOut(
        id=item_id,
        type=type,
        title=f"Title {item_id}",
        content="body",
        category=category,
        created_at=BASE + timedelta(days=days),
        published=published,
    )


@pytest.fixture
def remote_items():
    return [make_item("r1", days=10), make_item("r2", days=-3, type="insight", category="Compliance")]


@pytest.fixture
def static_items():
    return [
        make_item("static-a", days=5, type="case-study", category="SME Growth"),
        make_item("static-b", days=-10),
        make_item("static-c", days=1, published=False),
    ]


class TestMergeWithStatic:
    """Tests for merge_with_static."""

    def test_length_is_sum(self, remote_items, static_items):
        """Merged length equals remote plus static."""
        merged = merge_with_static(remote_items, static_items)

        assert len(merged) == len(remote_items) + len(static_items)

    def test_sorted_newest_first(self, remote_items, static_items):
        """Merged items are ordered by createdAt descending."""
        merged = merge_with_static(remote_items, static_items)

        stamps = [it.created_at for it in merged]
        assert stamps == sorted(stamps, reverse=True)
        assert [it.id for it in merged] == ["r1", "static-a", "static-c", "r2", "static-b"]

    def test_no_deduplication(self):
        """Items sharing an id are both kept."""
        merged = merge_with_static([make_item("same", days=1)], [make_item("same", days=2)])

        assert len(merged) == 2

    def test_inputs_not_mutated(self, remote_items, static_items):
        """Merging leaves both inputs untouched."""
        static_tuple = tuple(static_items)
        merge_with_static(remote_items, static_tuple)

        assert [it.id for it in remote_items] == ["r1", "r2"]
        assert static_tuple == tuple(static_items)

    def test_empty_remote(self, static_items):
        """With no remote items the static list comes back sorted."""
        merged = merge_with_static([], static_items)

        assert [it.id for it in merged] == ["static-a", "static-c", "static-b"]


class TestFilters:
    """Tests for the listing filters."""

    def test_empty_category_is_identity(self, remote_items):
        """An empty category returns the very same list."""
        assert filter_by_category(remote_items, "") is remote_items
        assert filter_by_category(remote_items, None) is remote_items

    def test_category_filter(self, remote_items, static_items):
        """Only exact category matches are kept."""
        items = merge_with_static(remote_items, static_items)

        assert [it.id for it in filter_by_category(items, "Compliance")] == ["r2"]
        assert filter_by_category(items, "compliance") == []

    def test_type_filter(self, remote_items, static_items):
        """Only items of the requested type are kept."""
        items = merge_with_static(remote_items, static_items)

        assert [it.id for it in filter_by_type(items, "blog")] == ["r1", "static-c", "static-b"]

    def test_type_filter_idempotent(self, remote_items, static_items):
        """Filtering twice by the same type changes nothing."""
        items = merge_with_static(remote_items, static_items)
        once = filter_by_type(items, "case-study")

        assert filter_by_type(once, "case-study") == once

    def test_filter_published(self, static_items):
        """Unpublished items are dropped."""
        assert [it.id for it in filter_published(static_items)] == ["static-a", "static-b"]

    def test_find_by_id(self, remote_items):
        """find_by_id returns the match or None."""
        assert find_by_id(remote_items, "r2").type == "insight"
        assert find_by_id(remote_items, "missing") is None


class TestStaticContent:
    """Tests for the bundled content file."""

    def test_bundle_loads(self):
        """The shipped bundle validates and is non-empty."""
        items = get_static_content()

        assert isinstance(items, tuple)
        assert len(items) > 0

    def test_bundle_ids_namespaced_and_unique(self):
        """Every static id carries the static- prefix and is unique."""
        ids = [it.id for it in get_static_content()]

        assert all(i.startswith("static-") for i in ids)
        assert len(set(ids)) == len(ids)

    def test_bundle_dates_are_utc(self):
        """Timestamps in the bundle are timezone-aware."""
        assert all(it.created_at.tzinfo is not None for it in get_static_content())

    def test_prefix_not_doubled(self, tmp_path):
        """Ids that already carry the prefix are left alone."""
        path = tmp_path / "content.json"
        path.write_text(json.dumps([
            {"id": "static-x", "type": "blog", "title": "X", "content": "c", "createdAt": "2024-01-01T00:00:00Z"},
            {"id": "y", "type": "insight", "title": "Y", "content": "c", "createdAt": "2024-01-02T00:00:00Z"},
        ]))

        assert [it.id for it in load_static_content(path)] == ["static-x", "static-y"]

    def test_namespace_static_id(self):
        """namespace_static_id adds the prefix once."""
        assert namespace_static_id("abc") == "static-abc"
        assert namespace_static_id("static-abc") == "static-abc"

    def test_bundle_missing_image_is_empty_string(self, tmp_path):
        """A null imageUrl in the bundle is exposed as an empty string."""
        path = tmp_path / "content.json"
        path.write_text(json.dumps([
            {"id": "z", "type": "blog", "title": "Z", "content": "c", "imageUrl": None,
             "createdAt": "2024-01-01T00:00:00Z"},
        ]))

        assert load_static_content(path)[0].image_url == ""


class TestExport:
    """Tests for the JSON export."""

    def test_export_uses_api_field_names(self, remote_items):
        """Exported items use the camelCase API shape."""
        exported = json.loads(export_json(remote_items))

        assert exported[0]["id"] == "r1"
        assert "createdAt" in exported[0]
        assert "imageUrl" in exported[0]
        assert "created_at" not in exported[0]

    def test_export_filename(self):
        """Export filename embeds the date."""
        assert export_filename(date(2025, 3, 9)) == "content-2025-03-09.json"
