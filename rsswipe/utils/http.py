import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from rsswipe.config import USER_AGENT

# ---------- HTTP session global com pool + retry (menor latência / resiliente) ----------
SESSION = requests.Session()
_RETRY = Retry(
    total=3,
    backoff_factor=0.3,
    status_forcelist=(429, 500, 502, 503, 504),
    allowed_methods=frozenset({"GET"}),
    raise_on_status=False,
)
_ADAPTER = HTTPAdapter(pool_connections=20, pool_maxsize=50, max_retries=_RETRY)
SESSION.mount("https://", _ADAPTER)
SESSION.mount("http://", _ADAPTER)
SESSION.headers.update({"User-Agent": USER_AGENT})
