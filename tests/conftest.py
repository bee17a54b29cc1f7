# tests/conftest.py
import json

import pytest
from fastapi.testclient import TestClient

from movie_service_api.app.core.config import Settings
from movie_service_api.app.main import create_app

SHAWSHANK = {"imdbID": "tt0111161", "Title": "The Shawshank Redemption"}
GODFATHER = {
    "imdbID": "tt0068646",
    "Title": "The Godfather",
    "Year": "1972",
    "Ratings": [{"Source": "Internet Movie Database", "Value": "9.2/10"}],
}

SAMPLE_MOVIES = [SHAWSHANK, GODFATHER]


@pytest.fixture
def movies_file(tmp_path):
    """Write the sample movie collection to a temporary file"""
    path = tmp_path / "movies.json"
    path.write_text(json.dumps(SAMPLE_MOVIES), encoding="utf-8")
    return path


@pytest.fixture
def aphorisms_file(tmp_path):
    """Write a single-entry aphorism file so the landing page is deterministic"""
    path = tmp_path / "aphorisms.txt"
    path.write_text("Stay hungry, stay foolish. - Steve Jobs\n", encoding="utf-8")
    return path


@pytest.fixture
def settings(movies_file, aphorisms_file):
    return Settings(
        api_version="1.2.3",
        movies_path=str(movies_file),
        aphorisms_path=str(aphorisms_file),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create a test client that returns 500 responses instead of raising"""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
