import re
from typing import Mapping, Optional
from bs4 import BeautifulSoup

from rsswipe.storage.models import Media

_IMAGE_EXT = re.compile(r"\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)


def content_body(entry: Mapping) -> str:
    """Corpo completo (content:encoded) do item, se houver."""
    parts = entry.get("content") or []
    return "".join((p.get("value") or "") for p in parts)


def _from_enclosure(entry: Mapping) -> Optional[Media]:
    enclosure = next((e for e in entry.get("enclosures") or [] if e.get("href")), None)
    if not enclosure:
        return None
    mime = enclosure.get("type") or ""
    if mime.startswith("video/"):
        return Media(type="video", url=enclosure["href"])
    if mime.startswith("image/"):
        return Media(type="image", url=enclosure["href"])
    return None


def _from_media_content(entry: Mapping) -> Optional[Media]:
    for media in entry.get("media_content") or []:
        url = media.get("url")
        if not url:
            continue
        medium = media.get("medium")
        mime = media.get("type") or ""
        if medium == "video" or mime.startswith("video/"):
            return Media(type="video", url=url)
        if medium == "image" or mime.startswith("image/") or _IMAGE_EXT.search(url):
            return Media(type="image", url=url)
    return None


def _from_thumbnail(entry: Mapping) -> Optional[Media]:
    thumbs = entry.get("media_thumbnail") or []
    url = thumbs[0].get("url") if thumbs else None
    return Media(type="image", url=url) if url else None


def _from_inline_html(entry: Mapping) -> Optional[Media]:
    html = content_body(entry) + (entry.get("summary") or "")
    if not html:
        return None
    img = BeautifulSoup(html, "html.parser").find("img")
    src = img.get("src") if img else None
    if src and src.startswith("http"):
        return Media(type="image", url=src)
    return None


# Ordem estrita de prioridade: o primeiro que encontrar vence
_EXTRACTORS = (_from_enclosure, _from_media_content, _from_thumbnail, _from_inline_html)


def extract_media(entry: Mapping) -> Optional[Media]:
    for extractor in _EXTRACTORS:
        media = extractor(entry)
        if media:
            return media
    return None
