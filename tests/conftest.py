import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def photo_payload():
    """Full /photos/:id response"""
    return load_fixture("unsplash_photo.json")


@pytest.fixture
def photos_list_payload():
    """Abbreviated /photos response, second entry has no created_at"""
    return load_fixture("unsplash_photos_list.json")


@pytest.fixture
def collection_payload():
    """/collections/:id response"""
    return load_fixture("unsplash_collection.json")
