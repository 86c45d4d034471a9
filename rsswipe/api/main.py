import json
import logging
import time
from contextlib import asynccontextmanager
from typing import Dict, Optional
from urllib.parse import urlparse

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from rsswipe.comments import scrape_comments
from rsswipe.feeds import placeholder_gradient
from rsswipe.storage import repository
from rsswipe.storage.models import Item, SortOrder
from rsswipe.tracker import FeedAggregator
from rsswipe.utils.logger import setup_logging

logger = logging.getLogger(__name__)

aggregator = FeedAggregator()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("RSSWipe API started (cache TTL %ss)", aggregator.cache.ttl)
    yield


def serialize_item(item: Item) -> Dict:
    data = item.model_dump(by_alias=True, exclude_none=True)
    if item.media is None:
        # fundo determinístico para cards sem mídia
        data["placeholder"] = placeholder_gradient(item.id)
    return data


def _is_valid_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


#%% APP

app = FastAPI(lifespan=lifespan)

# Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # ajuste se precisar restringir
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Compressão gzip para reduzir payloads de /feeds
app.add_middleware(GZipMiddleware, minimum_size=512)


@app.get("/health")
def health():
    return {"status": "ok", "ts": int(time.time())}


@app.get("/feeds")
def get_feeds(feeds: Optional[str] = None, order: SortOrder = SortOrder.chronological):
    if not feeds:
        raise HTTPException(400, "No feeds provided")
    try:
        urls = json.loads(feeds)
    except ValueError:
        raise HTTPException(400, "Invalid feeds parameter")
    if not isinstance(urls, list) or not urls or not all(isinstance(u, str) for u in urls):
        raise HTTPException(400, "No valid feed URLs")

    items = aggregator.aggregate(urls, order=order)
    return {"items": [serialize_item(i) for i in items]}


@app.get("/comments")
def get_comments(url: Optional[str] = None):
    if not url:
        raise HTTPException(400, "No URL provided")
    if not _is_valid_url(url):
        raise HTTPException(400, "Invalid URL")
    return scrape_comments(url).model_dump(by_alias=True, exclude_none=True)


# POST
@app.post("/force-refresh")
def force_refresh():
    aggregator.cache.clear()
    return {"status": "success"}


# ---------- Preferências (fontes, salvos, ordenação) ----------
@app.get("/sources")
def list_sources():
    return {"status": "success", "data": [s.model_dump() for s in repository.get_feeds()]}


@app.post("/sources")
def add_source(url: str, title: Optional[str] = None):
    if not _is_valid_url(url):
        raise HTTPException(400, "Invalid URL")
    feeds = repository.add_feed(url, title)
    return {"status": "success", "data": [s.model_dump() for s in feeds]}


@app.delete("/sources")
def remove_source(url: str):
    if not repository.remove_feed(url):
        raise HTTPException(404, "Source not found")
    return {"status": "success"}


@app.get("/saved")
def list_saved():
    return {"status": "success", "data": [serialize_item(i) for i in repository.get_saved_items()]}


@app.post("/saved")
def save_item(item: Item):
    saved = repository.save_item(item)
    return {"status": "success", "data": [serialize_item(i) for i in saved]}


@app.get("/saved/{item_id}")
def is_saved(item_id: str):
    return {"status": "success", "saved": repository.is_item_saved(item_id)}


@app.delete("/saved/{item_id}")
def unsave_item(item_id: str):
    if not repository.unsave_item(item_id):
        raise HTTPException(404, "Item not found")
    return {"status": "success"}


@app.get("/preferences/sort-order")
def get_sort_order():
    return {"status": "success", "order": repository.get_sort_order().value}


@app.put("/preferences/sort-order")
def set_sort_order(order: SortOrder):
    return {"status": "success", "order": repository.set_sort_order(order).value}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("rsswipe.api.main:app", host="0.0.0.0", port=8000, reload=True)
