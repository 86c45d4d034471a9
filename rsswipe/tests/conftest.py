# rsswipe/tests/conftest.py
import pytest

from rsswipe.storage.models import Item


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def raise_for_status(self):
        import requests
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeFeed:
    """Feed canned: devolve itens fixos (ou levanta) e conta chamadas."""

    calls = {}
    responses = {}

    def __init__(self, url, title=None):
        self.url = url

    def fetch(self):
        FakeFeed.calls[self.url] = FakeFeed.calls.get(self.url, 0) + 1
        result = FakeFeed.responses.get(self.url, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


def make_item(source_url, title, published_at, link=None):
    from rsswipe.feeds import item_id
    link = link or f"{source_url}/{title}"
    return Item(
        id=item_id(source_url, link, title),
        source_url=source_url,
        source_title=source_url,
        title=title,
        link=link,
        published_at=published_at,
    )


@pytest.fixture()
def fake_feed():
    FakeFeed.calls = {}
    FakeFeed.responses = {}
    return FakeFeed


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    # Redireciona o store para arquivo temporário
    from rsswipe import config
    db_file = tmp_path / "rsswipe_db.json"
    monkeypatch.setattr(config, "DB_PATH", str(db_file), raising=True)
    return str(db_file)


@pytest.fixture()
def app(monkeypatch, temp_db, fake_feed):
    # Sem rede: aggregator com feed falso e cache isolado
    from rsswipe.api import main as api_main
    from rsswipe.tracker import FeedAggregator, FeedCache

    monkeypatch.setattr(
        api_main, "aggregator", FeedAggregator(cache=FeedCache(), feed_factory=fake_feed), raising=True
    )
    return api_main.app


@pytest.fixture()
def client(app):
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def item_factory():
    return make_item


@pytest.fixture()
def fake_response():
    return FakeResponse
