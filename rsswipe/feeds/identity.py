"""
Identidade e normalização de itens.

- rolling_hash: hash de 32 bits (h * 31 + c, com overflow) sobre unidades UTF-16,
  reprodutível bit a bit entre implementações.
- item_id: id estável de um item a partir de (source_url, link, title).
- clean_description: remove <img>/<script>/<style>, extrai texto, colapsa espaços
  e trunca em DESCRIPTION_MAX_CHARS com reticências.
- placeholder_gradient: gradiente CSS determinístico para itens sem mídia.
"""
import math
from bs4 import BeautifulSoup

DESCRIPTION_MAX_CHARS = 300
ELLIPSIS = "..."
UNTITLED = "Untitled"

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_MASK32 = 0xFFFFFFFF


def _utf16_units(text: str):
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def rolling_hash(text: str) -> int:
    """Retorna o hash como inteiro de 32 bits COM sinal."""
    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & _MASK32
    if h & 0x80000000:
        h -= 1 << 32
    return h


def to_base36(n: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def item_id(source_url: str, link: str, title: str) -> str:
    return to_base36(abs(rolling_hash(f"{source_url}|{link}|{title}")))


def clean_description(html: str) -> str:
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(["img", "script", "style"]):
        tag.decompose()
    text = " ".join(soup.get_text().split())
    if len(text) > DESCRIPTION_MAX_CHARS:
        text = text[: DESCRIPTION_MAX_CHARS - len(ELLIPSIS)] + ELLIPSIS
    return text


def _rem(a: int, b: int) -> int:
    # resto com o sinal do dividendo (divisão truncada)
    return int(math.fmod(a, b))


def placeholder_gradient(id_: str) -> str:
    h = rolling_hash(id_)
    hue1 = abs(_rem(h, 360))
    hue2 = (hue1 + 40 + abs(_rem(h >> 8, 60))) % 360
    angle = abs(_rem(h >> 4, 180))
    return f"linear-gradient({angle}deg, hsl({hue1}, 70%, 35%), hsl({hue2}, 65%, 25%))"
