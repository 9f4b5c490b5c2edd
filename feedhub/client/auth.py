"""Client-side authentication: sign-in and page-load session guard."""

import logging
from dataclasses import dataclass, field
from typing import Any

from feedhub.client.api import ApiClient
from feedhub.exceptions import FeedHubError, RemoteRejection
from feedhub.schemas.auth import PresentableUser

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
TOKEN_COOKIE = "feedhub.token"


class AuthRedirect(FeedHubError):
    """No valid session; the page load must redirect instead of rendering."""

    def __init__(self, location: str = LOGIN_PATH):
        self.location = location
        super().__init__(f"Redirect to {location}")


@dataclass
class RequestContext:
    """What a page load knows about the incoming request."""

    path: str = "/"
    cookies: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Session:
    token: str
    user: PresentableUser


class AuthService:
    """Signs users in and guards pages that need a session."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.session: Session | None = None

    async def sign_in(self, credentials: dict[str, Any]) -> Session:
        """Exchange credentials for a token and the user's profile."""
        return self._start(await self.api.post("/auth/login", credentials))

    async def register(self, data: dict[str, Any]) -> Session:
        """Create an account and sign in with it."""
        return self._start(await self.api.post("/auth/register", data))

    async def authenticated(self, context: RequestContext) -> Session:
        """Resolve the session of a page load or raise AuthRedirect."""
        token = context.cookies.get(TOKEN_COOKIE)
        if not token:
            raise AuthRedirect()

        api = ApiClient(self.api.base_url, self.api.timeout, token, self.api.transport)
        try:
            user = PresentableUser.model_validate(await api.get("/auth/me"))
        except RemoteRejection as e:
            if e.status_code in (401, 403):
                logger.info(f"Session for {context.path} rejected, redirecting to login")
                raise AuthRedirect() from e
            raise
        return Session(token=token, user=user)

    def sign_out(self) -> None:
        self.session = None
        self.api.token = None

    def _start(self, body: dict[str, Any]) -> Session:
        self.session = Session(token=body["token"], user=PresentableUser.model_validate(body["user"]))
        self.api.token = self.session.token
        return self.session
