"""
Session Cookie Policy

Cookie attributes follow the request transport. No domain attribute is ever
set, so the browser scopes the cookie to the exact host.
"""

from dataclasses import dataclass

from fastapi import Request, Response

from config import ApplicationConfig


@dataclass(frozen=True)
class CookieOptions:
    httponly: bool
    secure: bool
    samesite: str
    path: str = "/"


def is_secure_request(request: Request) -> bool:
    """HTTPS either terminated here or reported by a proxy in X-Forwarded-Proto"""
    if request.url.scheme == "https":
        return True

    entries = [
        p
        for header in request.headers.getlist("x-forwarded-proto")
        for p in header.split(",")
    ]
    return any(p.strip().lower() == "https" for p in entries)


def get_session_cookie_options(request: Request) -> CookieOptions:
    secure = is_secure_request(request)
    return CookieOptions(
        httponly=True,
        secure=secure,
        samesite="none" if secure else "lax",
    )


def set_session_cookie(
    response: Response, request: Request, token: str, max_age: int
) -> None:
    options = get_session_cookie_options(request)
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=token,
        max_age=max_age,
        path=options.path,
        secure=options.secure,
        httponly=options.httponly,
        samesite=options.samesite,
    )


def clear_session_cookie(response: Response, request: Request) -> None:
    options = get_session_cookie_options(request)
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value="",
        max_age=-1,
        path=options.path,
        secure=options.secure,
        httponly=options.httponly,
        samesite=options.samesite,
    )
