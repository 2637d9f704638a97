"""Pytest configuration and fixtures"""
import os

import pytest

os.environ.setdefault("LOG_LEVEL", "WARNING")

from app import create_app
from shop import Shop


@pytest.fixture
def shop():
    """Shop seeded with the default test catalog"""
    s = Shop()
    s.seed([
        ("Milk", 200, 3),
        ("Table", 50, 2),
        ("Hammer", 80, 5),
        ("Fancy vase", 1223, 1),
    ])
    return s


@pytest.fixture
def app():
    return create_app(config={"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
