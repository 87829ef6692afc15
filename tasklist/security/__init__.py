from .gate import AuthenticationGate
from .identity import Identity, identity_from_user
from .passwords import PasswordHasher
from .policy import Decision, evaluate, is_public_path
from .tokens import create_access_token, decode_access_token, get_token_from_request

__all__ = [
    "AuthenticationGate",
    "Decision",
    "Identity",
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "evaluate",
    "get_token_from_request",
    "identity_from_user",
    "is_public_path",
]
