"""Tests for seed loading and the reseed script."""
import json
import logging

import httpx
import pytest

from scripts.reseed_catalog import trigger_reseed
from wanderly.config import DEFAULT_SEED_PATH
from wanderly.core.security import verify_password
from wanderly.domain.value_objects.enums import Category, PriceTier, Role
from wanderly.infrastructure.persistence.seed import (
    FALLBACK_ATTRACTIONS,
    build_seed,
    parse_attraction,
    read_attraction_records,
)


def _seed(path):
    return build_seed(
        path,
        admin_username="admin",
        admin_email="Admin@Wanderly.com",
        admin_password="admin123",
        hash_iterations=1000,
    )


@pytest.mark.unit
class TestBuildSeed:
    """Test the startup data set."""

    def test_packaged_document(self):
        seed = _seed(DEFAULT_SEED_PATH)

        assert len(seed.attractions) == 10
        assert [a.id for a in seed.attractions][:2] == ["attr-001", "attr-002"]
        red_fort = seed.attractions[0]
        assert red_fort.name == "Red Fort (Lal Qila)"
        assert red_fort.average_rating == 4.3
        assert red_fort.review_count == 12500
        assert red_fort.travel_info is not None
        assert red_fort.travel_info.best_option.mode

    def test_admin_account(self):
        (admin,) = _seed(DEFAULT_SEED_PATH).users

        assert admin.role == Role.ADMIN
        assert admin.email == "admin@wanderly.com"
        assert verify_password("admin123", admin.password_hash)

    def test_sample_reviews_on_first_attraction(self):
        seed = _seed(DEFAULT_SEED_PATH)

        assert [r.rating for r in seed.reviews] == [5.0, 4.5]
        assert {r.attraction_id for r in seed.reviews} == {"attr-001"}

    def test_missing_document_falls_back(self, tmp_path):
        seed = _seed(tmp_path / "nope.json")
        assert [a.name for a in seed.attractions] == [FALLBACK_ATTRACTIONS[0]["name"]]

    def test_malformed_document_falls_back(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert read_attraction_records(path) == FALLBACK_ATTRACTIONS

    def test_document_without_attractions_key(self, tmp_path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"places": []}), encoding="utf-8")
        assert read_attraction_records(path) == FALLBACK_ATTRACTIONS

    def test_malformed_records_are_skipped(self, tmp_path, caplog):
        good = {
            "name": "Lodhi Garden",
            "category": "nature",
            "description": "Gardens",
            "location": {"lat": 28.5931, "lng": 77.2197, "address": "Lodhi Road"},
            "price": "free",
        }
        records = [
            {key: value for key, value in good.items() if key != "name"},
            {**good, "name": "Gateway of India", "location": None},
            {**good, "name": "Moon Base", "category": "space"},
            {**good, "name": "   "},
            good,
        ]
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"attractions": records}), encoding="utf-8")

        with caplog.at_level(logging.ERROR):
            seed = _seed(path)

        assert [(a.id, a.name) for a in seed.attractions] == [("attr-001", "Lodhi Garden")]
        assert [r.attraction_id for r in seed.reviews] == ["attr-001", "attr-001"]
        assert sum("Skipping seed record" in r.message for r in caplog.records) == 4

    def test_seeded_store_keeps_recorded_ratings(self, store):
        store.reseed(_seed(DEFAULT_SEED_PATH))

        red_fort = store.get_attraction("attr-001")
        assert red_fort.average_rating == 4.3
        assert red_fort.review_count == 12500
        assert len(store.reviews_by_attraction("attr-001")) == 2


@pytest.mark.unit
def test_parse_attraction_defaults():
    attraction = parse_attraction({
        "name": "Lodhi Garden",
        "category": "nature",
        "description": "Gardens",
        "location": {"lat": 28.5931, "lng": 77.2197, "address": "Lodhi Road"},
        "price": "free",
    })

    assert attraction.category == Category.NATURE
    assert attraction.price == PriceTier.FREE
    assert attraction.images == []
    assert attraction.average_rating == 0
    assert attraction.travel_info is None


@pytest.mark.unit
class TestReseedScript:
    """Test the reseed command against a mocked server."""

    def test_posts_to_dev_endpoint(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, str(request.url)))
            return httpx.Response(200, json={"message": "Reseeded in-memory data"})

        client = httpx.Client(transport=httpx.MockTransport(handler))

        message = trigger_reseed("http://api.test/", client=client)

        assert message == "Reseeded in-memory data"
        assert seen == [("POST", "http://api.test/api/v1/dev/reseed")]

    def test_refused_outside_development(self):
        client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(403, json={"detail": "Forbidden"}))
        )
        with pytest.raises(httpx.HTTPStatusError):
            trigger_reseed("http://api.test", client=client)
