"""Caller identity resolution.

Orders store the owner as an opaque string so that principals coming from
the local user table (SimpleJWT) and from the external identity provider
(``ExternalIdentity``) can coexist.
"""

from __future__ import annotations

from typing import Any, Optional


def caller_identity(user: Any) -> Optional[str]:
    """Return the identity string of an authenticated principal.

    ``None`` means no identity could be resolved (anonymous or missing user).
    """
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    subject = getattr(user, "sub", None)
    if subject:
        return str(subject)
    pk = getattr(user, "pk", None)
    return str(pk) if pk is not None else None
