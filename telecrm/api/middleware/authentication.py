"""
Authentication Middleware

Resolves the session cookie to an AuthContext once per request, before
routing, and walls every page except login, invite and assets behind it.
"""

import posixpath

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

from telecrm.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from telecrm.app.use_cases.auth import ResolveIdentityUseCase

PUBLIC_PAGES = ("/login", "/signup")
PUBLIC_PAGE_PREFIXES = ("/invite", "/assets/")


def is_public_path(path: str, api_prefix: str, login_path: str) -> bool:
    """Paths reachable without a session: API, login/signup/invite pages, static assets"""
    if path == api_prefix or path.startswith(api_prefix.rstrip("/") + "/"):
        return True
    if path == login_path or path in PUBLIC_PAGES:
        return True
    if path.startswith(PUBLIC_PAGE_PREFIXES):
        return True
    # Static files such as /favicon.ico or /main.js
    return bool(posixpath.splitext(path.rsplit("/", 1)[-1])[1])


class AuthenticationMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, cookie_name: str, api_prefix: str, login_path: str):
        super().__init__(app)
        self.cookie_name = cookie_name
        self.api_prefix = api_prefix
        self.login_path = login_path

    async def dispatch(self, request: Request, call_next):
        token = request.cookies.get(self.cookie_name)

        async with request.app.state.session_factory() as session:
            auth = await ResolveIdentityUseCase(SqlAlchemyUnitOfWork(session)).execute(token)
        request.state.auth = auth

        if not auth.is_authenticated and not is_public_path(
            request.url.path, self.api_prefix, self.login_path
        ):
            return RedirectResponse(self.login_path, status_code=302)

        return await call_next(request)
