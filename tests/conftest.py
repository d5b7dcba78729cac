"""Shared fixtures for AirBudd tests."""

from datetime import date

import pytest
from pydantic import BaseModel, Field

import airbudd.config
from airbudd.builder import AirBuddFormBuilder
from airbudd.config import FormDefaults


class Article(BaseModel):
    """Record used across the builder tests."""

    title: str = Field(..., title="Headline")
    body: str = ""
    published: bool = False
    category: str | None = None
    country: str | None = None
    published_on: date | None = None


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Every test starts from the built-in defaults, whatever the environment says."""
    monkeypatch.setattr(airbudd.config, "config", FormDefaults())
    return airbudd.config.config


@pytest.fixture
def article():
    return Article(title="Hello", body="First post", published=True, category="news",
                   published_on=date(2024, 3, 9))


@pytest.fixture
def make_builder():
    """Builder factory over a plain mapping record."""

    def _make(values=None, errors=None, **overrides):
        return AirBuddFormBuilder("article", values or {}, errors=errors, defaults=FormDefaults(), **overrides)

    return _make


@pytest.fixture
def article_model():
    return Article
