# rsswipe/tests/test_rss_feed.py
from datetime import datetime

import pytest
import requests

from rsswipe.feeds import RssFeed, item_id
from rsswipe.feeds import rss as rss_module

FEED_URL = "https://example.com/feed.xml"

SAMPLE_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:media="http://search.yahoo.com/mrss/"
     xmlns:content="http://purl.org/rss/1.0/modules/content/">
<channel>
  <title>Example Feed</title>
  <link>https://example.com/</link>
  <item>
    <title>Video post</title>
    <link>https://example.com/video</link>
    <pubDate>Wed, 03 Jan 2024 10:00:00 GMT</pubDate>
    <description>&lt;p&gt;Hi   there&lt;/p&gt;</description>
    <enclosure url="https://example.com/v.mp4" type="video/mp4" length="100"/>
    <comments>https://example.com/video#comments</comments>
  </item>
  <item>
    <link>https://example.com/inline</link>
    <pubDate>Mon, 01 Jan 2024 08:00:00 GMT</pubDate>
    <description>short summary</description>
    <content:encoded><![CDATA[<p>Full <img src="https://example.com/inline.png"/> body</p>]]></content:encoded>
  </item>
  <item>
    <title>No date</title>
    <link>https://example.com/nodate</link>
  </item>
</channel>
</rss>
"""


@pytest.fixture()
def patched_get(monkeypatch, fake_response):
    def _patch(response=None, exc=None):
        calls = []

        def fake_get(url, **kwargs):
            calls.append(url)
            if exc:
                raise exc
            return response

        monkeypatch.setattr(rss_module.SESSION, "get", fake_get, raising=True)
        return calls
    return _patch


def test_fetch_normalizes_entries(patched_get, fake_response):
    patched_get(fake_response(SAMPLE_RSS))
    items = RssFeed(FEED_URL).fetch()
    assert len(items) == 3

    video, inline, nodate = items
    assert video.source_title == "Example Feed"
    assert video.id == item_id(FEED_URL, "https://example.com/video", "Video post")
    assert video.description == "Hi there"
    assert video.published_at == "2024-01-03T10:00:00+00:00"
    assert video.media.type == "video"
    assert video.media.url == "https://example.com/v.mp4"
    assert video.discussion_url == "https://example.com/video#comments"

    assert inline.title == "Untitled"
    # id usa o título cru (vazio), não o placeholder
    assert inline.id == item_id(FEED_URL, "https://example.com/inline", "")
    assert inline.description == "Full body"
    assert inline.media.url == "https://example.com/inline.png"
    assert inline.discussion_url is None

    # sem data: usa o horário atual
    assert datetime.fromisoformat(nodate.published_at).year >= 2024
    assert nodate.media is None


def test_fetch_ids_are_stable_across_fetches(patched_get, fake_response):
    patched_get(fake_response(SAMPLE_RSS))
    first = [i.id for i in RssFeed(FEED_URL).fetch()]
    second = [i.id for i in RssFeed(FEED_URL).fetch()]
    assert first == second
    assert len(set(first)) == len(first)


def test_source_title_falls_back_to_hostname(patched_get, fake_response):
    xml = SAMPLE_RSS.replace("<title>Example Feed</title>", "")
    patched_get(fake_response(xml))
    assert RssFeed(FEED_URL).fetch()[0].source_title == "example.com"


def test_http_error_yields_empty(patched_get, fake_response):
    patched_get(fake_response("oops", status_code=503))
    assert RssFeed(FEED_URL).fetch() == []


def test_network_error_yields_empty(patched_get):
    patched_get(exc=requests.ConnectionError("down"))
    assert RssFeed(FEED_URL).fetch() == []


def test_garbage_body_yields_empty(patched_get, fake_response):
    patched_get(fake_response("this is not a feed at all"))
    assert RssFeed(FEED_URL).fetch() == []
