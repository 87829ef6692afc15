from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

from ..config import ACCESS_TOKEN_EXPIRE_MINUTES, SECRET_KEY
from ..models import Role
from .identity import Identity

ALGORITHM = "HS256"
TOKEN_COOKIE = "token"


def create_access_token(identity: Identity, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT carrying the identity."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": identity.subject,
        "role": Role(identity.authority).value,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_token_claims(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None


def decode_access_token(token: str) -> Optional[Identity]:
    """Rebuild the Identity from a token, or None if it does not verify."""
    payload = decode_token_claims(token)
    if not payload:
        return None

    subject = payload.get("sub")
    if not subject or not isinstance(subject, str):
        return None
    try:
        authority = Role(payload.get("role", Role.USER.value))
    except ValueError:
        return None
    return Identity(subject=subject, authority=authority)


def get_token_from_request(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.lower().startswith("bearer "):
        return auth_header.split(" ", 1)[1].strip() or None
    return request.cookies.get(TOKEN_COOKIE)
