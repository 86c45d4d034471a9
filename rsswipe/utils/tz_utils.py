from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional


def parse_timestamp(value: Optional[str]) -> Optional[float]:
    """Converte ISO 8601 ou RFC 822 em epoch (UTC). None se não parseável."""
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        try:
            dt = parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError):
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()


def local_today() -> date:
    """Data de calendário local (semente do shuffle diário)."""
    return datetime.now().date()
