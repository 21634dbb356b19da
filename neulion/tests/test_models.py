"""
Unit tests for catalog data models.
"""

import json
from datetime import datetime

import pytest
from pydantic import ValidationError

from neulion.modules.catalog.models import Category, NeulionJSONEncoder, ProgramDetail
from neulion.modules.errors import ErrorKind


class TestCategory:
    """Test Category model."""

    def test_from_api_names(self):
        category = Category.model_validate(
            {"categoryId": "10", "categoryKey": "nba", "name": "NBA", "parentId": "2"}
        )

        assert category.id == 10
        assert category.key == "nba"
        assert category.parent_id == 2

    def test_from_python_names(self):
        category = Category(id=1, key="k", name="n", parent_id=None)
        assert category.model_dump(by_alias=True) == {
            "categoryId": 1,
            "categoryKey": "k",
            "name": "n",
            "parentId": None,
        }

    def test_invalid_id(self):
        with pytest.raises(ValidationError):
            Category.model_validate({"categoryId": "not-a-number"})


class TestProgramDetail:
    """Test ProgramDetail model."""

    def test_extra_fields_pass_through(self):
        detail = ProgramDetail.model_validate(
            {"programId": 5, "videoUrl": "http://cdn/x.mp4", "shareInPlayer": True}
        )

        record = detail.to_record()
        assert record["programId"] == 5
        assert record["videoUrl"] == "http://cdn/x.mp4"
        assert record["shareInPlayer"] is True
        assert record["categoryIdArray"] == []
        assert record["tagArray"] == []

    def test_tags_are_strings(self):
        detail = ProgramDetail.model_validate({"tagArray": [2015, "finals"]})
        assert detail.tag_array == ["2015", "finals"]

    def test_nil_tags_are_dropped(self):
        detail = ProgramDetail.model_validate({"tagArray": ["finals", None]})
        assert detail.tag_array == ["finals"]

    def test_category_ids_are_ints(self):
        detail = ProgramDetail.model_validate({"categoryIdArray": ["3", 4]})
        assert detail.category_id_array == [3, 4]


class TestJSONEncoder:
    """Test JSON serialization of records."""

    def test_encodes_models_and_dates(self):
        payload = {
            "category": Category(id=1, name="n"),
            "when": datetime(2015, 1, 2, 3, 4, 5),
            "kind": ErrorKind.CONNECTION,
        }

        decoded = json.loads(json.dumps(payload, cls=NeulionJSONEncoder))

        assert decoded["category"]["categoryId"] == 1
        assert decoded["when"] == "2015-01-02T03:04:05"
        assert decoded["kind"] == "connection"
