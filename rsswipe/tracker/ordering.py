"""
Ordenação do stream agregado.

- chronological: sort estável por publishedAt desc; datas não parseáveis vão
  para o fim, na ordem em que chegaram.
- random: Fisher-Yates com LCG semeado pela data (year*10000 + month*100 + day).
  Parâmetros do LCG (Numerical Recipes) são contrato de compatibilidade:
  state = (state * 1664525 + 1013904223) mod 2^32, r = state / 2^32.
"""
from datetime import date
from typing import List, Optional, Sequence

from rsswipe.storage.models import Item, SortOrder
from rsswipe.utils.tz_utils import local_today, parse_timestamp

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32


def date_seed(day: date) -> int:
    return day.year * 10000 + day.month * 100 + day.day


class Lcg:
    def __init__(self, seed: int):
        self.state = seed % LCG_MODULUS

    def next(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS


def seeded_shuffle(items: Sequence, seed: int) -> list:
    result = list(items)
    rng = Lcg(seed)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.next() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def sort_chronological(items: Sequence[Item]) -> List[Item]:
    def key(item: Item):
        ts = parse_timestamp(item.published_at)
        return (ts is not None, ts if ts is not None else 0.0)

    return sorted(items, key=key, reverse=True)


def order_items(items: Sequence[Item], order: SortOrder = SortOrder.chronological,
                today: Optional[date] = None) -> List[Item]:
    if order == SortOrder.random:
        return seeded_shuffle(items, date_seed(today or local_today()))
    return sort_chronological(items)
