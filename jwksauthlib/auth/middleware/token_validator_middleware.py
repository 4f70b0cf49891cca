import logging
import typing

from fastapi import Request
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from jwksauthlib.auth.exceptions.jwks_auth_exception import JwksAuthException
from jwksauthlib.auth.token_authenticator import TokenAuthenticator
from jwksauthlib.auth.token_validator import TokenValidator
from jwksauthlib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["AUTH"])


class TokenValidatorMiddleware(BaseHTTPMiddleware):
    """
    Validates the bearer token of each request and exposes the outcome on ``request.state``.

    - ``request.state.claims``: verified claims, or None
    - ``request.state.auth_error``: ErrorKind of a rejected token, or None

    Requests are never rejected here; endpoints decide what to do with the outcome.

    Usage:
        app = FastAPI()
        app.add_middleware(TokenValidatorMiddleware, authenticator=authenticator)
    """

    def __init__(self, app: ASGIApp, authenticator: TokenAuthenticator):
        super().__init__(app)
        self.authenticator = authenticator

    async def dispatch(
        self,
        request: Request,
        call_next: typing.Callable[[Request], typing.Awaitable[Response]],
    ) -> Response:
        request.state.claims = None
        request.state.auth_error = None
        token: str | None = TokenValidator.extract_token(
            authorization_header=request.headers.get("authorization")
        )
        if token:
            try:
                # RSA verification is CPU-bound; keep it off the event loop
                request.state.claims = await run_in_threadpool(
                    self.authenticator.validate_token, token
                )
            except JwksAuthException as e:
                logger.info(f"Bearer token rejected [{e.kind.value}] for {request.url.path}")
                request.state.auth_error = e.kind
        response = await call_next(request)
        return response
