"""Per-request authorization policy.

A request is either unauthenticated (no identity) or authenticated. The
decision is made once, in order:

1. a path under a public prefix is allowed whatever the state;
2. any other path is allowed only with an identity.
"""

import enum
from typing import Iterable, Optional

from ..config import PUBLIC_PATH_PREFIXES
from .identity import Identity


class Decision(str, enum.Enum):
    ALLOW = "allow"
    REJECT = "reject"


def is_public_path(path: str, public_prefixes: Iterable[str] = PUBLIC_PATH_PREFIXES) -> bool:
    """Match ``path`` against the allowlist on segment boundaries.

    ``/api/auth/`` covers ``/api/auth`` and everything below it, but not
    ``/api/authors``.
    """
    for prefix in public_prefixes:
        base = prefix.rstrip("/")
        if not base:
            return True
        if path == base or path.startswith(base + "/"):
            return True
    return False


def evaluate(
    path: str,
    identity: Optional[Identity],
    public_prefixes: Iterable[str] = PUBLIC_PATH_PREFIXES,
) -> Decision:
    if is_public_path(path, public_prefixes):
        return Decision.ALLOW
    if identity is not None:
        return Decision.ALLOW
    return Decision.REJECT
