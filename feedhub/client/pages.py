"""Pages: a form wired to its schema, endpoint and access rules."""

from typing import Any

from feedhub.client.api import ApiClient
from feedhub.client.auth import AuthService, RequestContext, Session
from feedhub.client.controller import Form, FormController, FormState
from feedhub.client.notifications import Notifier, Router
from feedhub.client.schemas import feed_schema, login_schema, register_schema
from feedhub.schemas.auth import PresentableUser, UserLogin, UserRegister
from feedhub.schemas.feed import FeedCreate


class Page:
    form: Form
    controller: FormController

    async def submit(self, **values: Any) -> FormState:
        """Fill in the given fields and submit the form."""
        self.form.set_values(values)
        return await self.controller.submit()

    def close(self) -> None:
        """Tear the page down; pending submissions no longer touch it."""
        self.form.unmount()


class LoginPage(Page):
    def __init__(self, auth: AuthService, notifier: Notifier, router: Router):
        self.auth = auth
        self.form = Form({"email": "", "password": ""})
        self.controller = FormController(
            self.form,
            login_schema,
            self._sign_in,
            notifier,
            router,
            success_path="/",
            success_message=lambda data, session: f"Welcome {session.user.name}!",
            failure_title="Login failed.",
            clear_on_failure=("password",),
        )

    async def _sign_in(self, credentials: UserLogin) -> Session:
        return await self.auth.sign_in(credentials.model_dump())


class RegisterPage(Page):
    def __init__(self, auth: AuthService, notifier: Notifier, router: Router):
        self.auth = auth
        self.form = Form({"name": "", "email": "", "password": ""})
        self.controller = FormController(
            self.form,
            register_schema,
            self._register,
            notifier,
            router,
            success_path="/",
            success_message=lambda data, session: f"Welcome {session.user.name}!",
            failure_title="Registration failed.",
            clear_on_failure=("password",),
        )

    async def _register(self, data: UserRegister) -> Session:
        return await self.auth.register(data.model_dump())


class CreateFeedPage(Page):
    """Feed provider creation. `is_public` is disabled unless the user is an admin."""

    def __init__(
        self,
        user: PresentableUser,
        api: ApiClient,
        notifier: Notifier,
        router: Router,
    ):
        self.user = user
        self.api = api
        self.form = Form(
            {"name": "", "url": "", "is_active": True, "is_public": False},
            disabled=() if user.is_admin else ("is_public",),
        )
        self.controller = FormController(
            self.form,
            feed_schema,
            self._save,
            notifier,
            router,
            success_path="/feeds",
            success_message=lambda data, feed: f"Feed {data.name} created successfully!",
            failure_title="Resource creation failed.",
        )

    @classmethod
    async def load(
        cls,
        context: RequestContext,
        auth: AuthService,
        notifier: Notifier,
        router: Router,
    ) -> "CreateFeedPage":
        """Build the page for an authenticated request; raises AuthRedirect otherwise."""
        session = await auth.authenticated(context)
        api = ApiClient(auth.api.base_url, auth.api.timeout, session.token, auth.api.transport)
        return cls(session.user, api, notifier, router)

    async def _save(self, data: FeedCreate) -> dict[str, Any]:
        return await self.api.post("/feeds", data.model_dump(mode="json", exclude_unset=True))
