import logging

from fastapi import Request

from ..exception_handlers import error_response
from ..exceptions import UnauthorizedError
from .policy import Decision, evaluate
from .tokens import decode_access_token, get_token_from_request

logger = logging.getLogger(__name__)


async def authentication_middleware(request: Request, call_next):
    """Establish the request identity and apply the authorization policy.

    Rejected requests never reach a router, so they cannot touch the store.
    """
    identity = None
    token = get_token_from_request(request)
    if token:
        identity = decode_access_token(token)

    request.state.identity = identity

    if evaluate(request.url.path, identity) is Decision.REJECT:
        logger.debug("Rejected unauthenticated %s %s", request.method, request.url.path)
        return error_response(UnauthorizedError())

    return await call_next(request)
