from __future__ import annotations

from typing import Any, Optional


def as_pk(value: Any) -> Optional[int]:
    """Coerce a URL lookup value into an integer primary key.

    Returns ``None`` for anything that cannot be a row ID, so callers can
    answer with their own not-found error instead of a routing 404 page.
    """
    try:
        pk = int(str(value))
    except (TypeError, ValueError):
        return None
    return pk if pk > 0 else None
