from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from onchain_summer.api.deps import get_article_client, get_schedule, get_settings
from onchain_summer.config import Settings
from onchain_summer.main import app
from onchain_summer.services.articles import Article
from onchain_summer.services.schedule import Drop, build_schedule
from tests.factories import make_drop, make_partner


class FakeArticleClient:
    def __init__(self, articles: dict[str, Article] | None = None):
        self.articles = articles or {}
        self.calls: list[str] = []

    def fetch_article(self, digest: str) -> Article | None:
        self.calls.append(digest)
        return self.articles.get(digest)


@pytest.fixture
def d1() -> Drop:
    return make_drop("0xd1")


@pytest.fixture
def d2() -> Drop:
    return make_drop("0xd2")


@pytest.fixture
def schedule(d1, d2):
    return build_schedule({
        "2023-08-10": make_partner("fwb", drops=(d1, d2)),
        "2023-08-15": make_partner("later", drops=(make_drop("0xl1"),)),
        "2023-08-01": make_partner("earlier"),
    })


@pytest.fixture
def article_client() -> FakeArticleClient:
    return FakeArticleClient({"digest-fwb": Article(title="Hello", body="# Body")})


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, site_url="https://onchainsummer.xyz", allow_spoof_date=True)


@pytest.fixture
def client(schedule, article_client, test_settings):
    app.dependency_overrides[get_schedule] = lambda: schedule
    app.dependency_overrides[get_article_client] = lambda: article_client
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
