"""
Store de preferências em arquivo JSON (fontes seguidas, itens salvos, ordenação).

Consumido pelas rotas da API, nunca pelo pipeline de agregação. Formato:
    {"feeds": [Source...], "saved": [Item...], "sort_order": "chronological"}
"""
import os
import json
import logging
from threading import Lock
from typing import Dict, List

from rsswipe import config
from rsswipe.storage.models import Item, SortOrder, Source

logger = logging.getLogger(__name__)

db_lock = Lock()

DEFAULT_FEEDS: List[Source] = [
    Source(url="https://hnrss.org/frontpage", title="Hacker News"),
    Source(url="https://feeds.bbci.co.uk/news/rss.xml", title="BBC News"),
    Source(url="https://techcrunch.com/feed/", title="TechCrunch"),
]


def _db_path() -> str:
    return config.DB_PATH


def load_db() -> Dict:
    path = _db_path()
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        return raw if isinstance(raw, dict) else {}
    except (json.JSONDecodeError, ValueError):
        logger.warning("%s is empty or corrupt; starting from defaults.", path)
        return {}


def save_db(db: Dict):
    path = _db_path()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(db, f, ensure_ascii=False, indent=2)


# ---------- Fontes ----------
def _feeds(db: Dict) -> List[Source]:
    if "feeds" not in db:
        # primeira leitura: inicializa com os defaults
        db["feeds"] = [s.model_dump() for s in DEFAULT_FEEDS]
        save_db(db)
    return [Source(**f) for f in db["feeds"]]


def get_feeds() -> List[Source]:
    with db_lock:
        return _feeds(load_db())


def add_feed(url: str, title: str = None) -> List[Source]:
    with db_lock:
        db = load_db()
        feeds = _feeds(db)
        if any(f.url == url for f in feeds):
            return feeds
        feeds.append(Source(url=url, title=title))
        db["feeds"] = [f.model_dump() for f in feeds]
        save_db(db)
        return feeds


def remove_feed(url: str) -> bool:
    with db_lock:
        db = load_db()
        feeds = _feeds(db)
        kept = [f for f in feeds if f.url != url]
        if len(kept) == len(feeds):
            return False
        db["feeds"] = [f.model_dump() for f in kept]
        save_db(db)
        return True


# ---------- Itens salvos ----------
def get_saved_items() -> List[Item]:
    with db_lock:
        return [Item(**i) for i in load_db().get("saved", [])]


def save_item(item: Item) -> List[Item]:
    with db_lock:
        db = load_db()
        saved = [Item(**i) for i in db.get("saved", [])]
        if any(s.id == item.id for s in saved):
            return saved
        saved.insert(0, item)  # mais recente primeiro
        db["saved"] = [s.model_dump(by_alias=True) for s in saved]
        save_db(db)
        return saved


def unsave_item(item_id: str) -> bool:
    with db_lock:
        db = load_db()
        saved = db.get("saved", [])
        kept = [i for i in saved if i.get("id") != item_id]
        if len(kept) == len(saved):
            return False
        db["saved"] = kept
        save_db(db)
        return True


def is_item_saved(item_id: str) -> bool:
    with db_lock:
        return any(i.get("id") == item_id for i in load_db().get("saved", []))


# ---------- Preferência de ordenação ----------
def get_sort_order() -> SortOrder:
    with db_lock:
        value = load_db().get("sort_order", SortOrder.chronological.value)
    try:
        return SortOrder(value)
    except ValueError:
        return SortOrder.chronological


def set_sort_order(order: SortOrder) -> SortOrder:
    with db_lock:
        db = load_db()
        db["sort_order"] = SortOrder(order).value
        save_db(db)
    return SortOrder(order)
