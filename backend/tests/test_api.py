import httpx

from onchain_summer.api.deps import get_article_client
from onchain_summer.config import Settings
from onchain_summer.main import app
from onchain_summer.services.articles import Article, ArticleClient


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_partner_page_after_its_date(client, d1, d2):
    r = client.get("/partners/fwb", params={"spoofDate": "2023-08-12"})

    assert r.status_code == 200
    body = r.json()
    assert body["date"] == "2023-08-10"
    assert body["partner"]["slug"] == "fwb"
    assert body["featured_drop"]["address"] == d1.address
    assert [d["address"] for d in body["remaining_drops"]] == [d2.address]
    assert body["static_headline"] is False
    assert body["share_url"] == "https://onchainsummer.xyz/partner/fwb"
    assert body["article"] == {"title": "Hello", "body": "# Body"}


def test_partner_page_with_drop_param(client, d1, d2):
    r = client.get("/partners/fwb", params={"spoofDate": "2023-08-12", "drop": d2.address})

    body = r.json()
    assert body["featured_drop"]["address"] == d2.address
    assert [d["address"] for d in body["remaining_drops"]] == [d1.address]
    assert body["static_headline"] is True
    assert body["share_url"] == f"https://onchainsummer.xyz/partner/fwb?drop={d2.address}"


def test_repeated_query_params_use_first_value(client, d1, d2):
    r = client.get(f"/partners/fwb?spoofDate=2023-08-12&spoofDate=2023-08-01&drop={d2.address}&drop={d1.address}")

    assert r.status_code == 200
    assert r.json()["featured_drop"]["address"] == d2.address


def test_partner_page_before_its_date_redirects(client):
    r = client.get("/partners/fwb", params={"spoofDate": "2023-08-05"}, follow_redirects=False)

    assert r.status_code == 307
    assert r.headers["location"] == "/#drops"


def test_unknown_slug_is_404(client):
    r = client.get("/partners/unknown-slug", params={"spoofDate": "2023-08-12"})

    assert r.status_code == 404


def test_bad_spoof_date_is_400(client):
    r = client.get("/partners/fwb", params={"spoofDate": "not-a-date"})

    assert r.status_code == 400


def test_spoof_date_ignored_when_disabled(client, test_settings):
    test_settings.allow_spoof_date = False

    # Real clock is well past 2023-08-15, so the spoofed past date no longer gates the page
    r = client.get("/partners/later", params={"spoofDate": "2023-08-01"}, follow_redirects=False)

    assert r.status_code == 200


def test_missing_article_still_renders(client, article_client):
    article_client.articles.clear()

    r = client.get("/partners/fwb", params={"spoofDate": "2023-08-12"})

    assert r.status_code == 200
    assert r.json()["article"] is None
    assert article_client.calls == ["digest-fwb"]


def test_partner_without_drops(client, article_client):
    article_client.articles["digest-earlier"] = Article(title="t", body="b")

    body = client.get("/partners/earlier", params={"spoofDate": "2023-08-12"}).json()

    assert body["featured_drop"] is None
    assert body["remaining_drops"] == []


def test_schedule_lists_live_partners(client):
    body = client.get("/schedule", params={"spoofDate": "2023-08-12"}).json()

    assert body["today"] == "2023-08-12"
    assert [(p["date"], p["slug"]) for p in body["partners"]] == [("2023-08-01", "earlier"), ("2023-08-10", "fwb")]


def test_malformed_article_response_still_renders(client):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"transactions": {"edges": 5}}})

    config = Settings(_env_file=None, arweave_graphql_url="https://arweave.test/graphql")
    app.dependency_overrides[get_article_client] = lambda: ArticleClient(config, transport=httpx.MockTransport(handler))

    r = client.get("/partners/fwb", params={"spoofDate": "2023-08-12"})

    assert r.status_code == 200
    assert r.json()["article"] is None
