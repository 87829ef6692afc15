import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, Response, status

from ..config import ACCESS_TOKEN_EXPIRE_MINUTES
from ..dependencies import (
    get_auth_gate,
    get_current_user,
    get_password_hasher,
    get_user_repository,
)
from ..exceptions import DuplicateUsernameError
from ..models import User
from ..repositories import UserRepository
from ..schemas.user import (
    AuthResponse,
    SessionInfo,
    SessionResponse,
    User as UserSchema,
    UserCreate,
    UserLogin,
)
from ..security import (
    AuthenticationGate,
    PasswordHasher,
    create_access_token,
    decode_access_token,
    get_token_from_request,
    identity_from_user,
)
from ..security.tokens import TOKEN_COOKIE, decode_token_claims

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_token_cookie(response: Response, access_token: str) -> None:
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=access_token,
        httponly=True,
        secure=False,  # Set to True in production with HTTPS
        samesite="lax",
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user: UserCreate,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Create a new user account and sign it in."""
    if users.exists(user.username):
        raise DuplicateUsernameError(user.username)

    db_user = users.save(
        User(username=user.username, password=hasher.hash_password(user.password))
    )
    logger.info("User registered: %s", db_user.username)

    access_token = create_access_token(identity_from_user(db_user))
    _set_token_cookie(response, access_token)

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": db_user,
    }


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    response: Response,
    gate: AuthenticationGate = Depends(get_auth_gate),
    users: UserRepository = Depends(get_user_repository),
):
    """Exchange a username and password for a bearer token."""
    identity = gate.authenticate(credentials.username, credentials.password)

    access_token = create_access_token(identity)
    _set_token_cookie(response, access_token)

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": users.find_by_username(identity.subject),
    }


@router.post("/signout")
def signout(response: Response):
    """Clear the token cookie. The server holds no session to end."""
    response.delete_cookie(key=TOKEN_COOKIE)
    return {"success": True}


@router.get("/session", response_model=SessionResponse)
def get_session(request: Request):
    """Describe the identity carried by the presented token, if any."""
    token = get_token_from_request(request)
    identity = decode_access_token(token) if token else None
    if identity is None:
        return {"session": None}

    expires_at = None
    exp = decode_token_claims(token).get("exp")
    if exp is not None:
        expires_at = datetime.fromtimestamp(exp, tz=timezone.utc).isoformat()

    return {
        "session": SessionInfo(
            subject=identity.subject,
            authority=identity.authority,
            expires_at=expires_at,
        )
    }


@router.get("/me", response_model=UserSchema)
def read_users_me(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return current_user
