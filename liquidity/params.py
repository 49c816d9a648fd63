"""Query-string construction for list and lookup endpoints.

The pipeline takes a path that already carries its query string; these
helpers build it. Values are percent-encoded, ``None``/empty values are
dropped, and list values are emitted as repeated ``key=value`` pairs in input
order (``currencies=USD&currencies=BTC``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union
from urllib.parse import quote

from common.datetime import DateLike, format_rfc3339

__all__ = ["Params", "build_query", "with_query", "ids"]

Pair = Tuple[str, Any]


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(pairs: Iterable[Pair]) -> str:
    """Encode ordered ``(key, value)`` pairs as a query string without ``?``."""
    parts: List[str] = []
    for key, value in pairs:
        values: Sequence[Any] = value if isinstance(value, (list, tuple)) else (value,)
        for v in values:
            if _is_blank(v):
                continue
            parts.append(f"{quote(key, safe='')}={quote(_render(v), safe='')}")
    return "&".join(parts)


def with_query(path: str, pairs: Iterable[Pair]) -> str:
    """Append the encoded *pairs* to *path* (no ``?`` when nothing remains)."""
    query = build_query(pairs)
    return f"{path}?{query}" if query else path


@dataclass(slots=True)
class Params:
    """Filter for list endpoints.

    ``id`` is the owning resource (user for cards, card for transactions);
    the endpoint decides which query key it is sent under. ``lek`` is the
    opaque cursor returned by the previous page and is passed back verbatim.
    """

    id: Optional[str] = None
    type: Optional[str] = None
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None
    limit: Optional[int] = None
    lek: Optional[str] = None

    def pairs(self, id_key: str, *, include_type: bool = True) -> List[Pair]:
        out: List[Pair] = [(id_key, self.id)]
        if include_type:
            out.append(("type", self.type))
        out += [
            ("startDate", format_rfc3339(self.start_date) if self.start_date else None),
            ("endDate", format_rfc3339(self.end_date) if self.end_date else None),
            ("limit", self.limit),
            ("lek", self.lek),
        ]
        return out

    def next_page(self, lek: Optional[str]) -> "Params":
        """Copy of these params pointing at the page after *lek*."""
        return Params(
            id=self.id,
            type=self.type,
            start_date=self.start_date,
            end_date=self.end_date,
            limit=self.limit,
            lek=lek,
        )


def ids(value: Union[str, Sequence[str], None]) -> Optional[Sequence[str]]:
    """Normalise a single code or a list of codes into a list."""
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    return list(value)
