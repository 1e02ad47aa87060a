import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from .error import ClientError, ServerError
from .middleware.authentication import AuthenticationMiddleware
from .middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


@asynccontextmanager
async def lifespan(app: FastAPI):
    from telecrm.depends import engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield
    await engine.dispose()


def create_app(ApplicationConfig, session_factory=None) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if session_factory is None:
        from telecrm.depends import AsyncSessionLocal

        session_factory = AsyncSessionLocal
        app = FastAPI(title="TeleCRM API", version="0.1.0", lifespan=lifespan)
    else:
        app = FastAPI(title="TeleCRM API", version="0.1.0")

    app.state.session_factory = session_factory

    # Starlette runs the last added middleware first
    app.add_middleware(
        AuthenticationMiddleware,
        cookie_name=ApplicationConfig.SESSION_COOKIE_NAME,
        api_prefix=ApplicationConfig.API_PREFIX,
        login_path=ApplicationConfig.LOGIN_PATH,
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from telecrm.api.routes import (
        appointment,
        call_log,
        campaign,
        dashboard,
        health_check,
        invitation,
        lead,
        lead_list,
        oauth,
        session,
        user,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(session.router, prefix=prefix, tags=["Authentication"])
    app.include_router(oauth.router, prefix=prefix, tags=["OAuth"])
    app.include_router(invitation.router, prefix=prefix, tags=["Invitations"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(lead.router, prefix=prefix, tags=["Leads"])
    app.include_router(call_log.router, prefix=prefix, tags=["Call Logs"])
    app.include_router(dashboard.router, prefix=prefix, tags=["Dashboard"])
    app.include_router(appointment.router, prefix=prefix, tags=["Appointments"])
    app.include_router(lead_list.router, prefix=prefix, tags=["Lists"])
    app.include_router(campaign.router, prefix=prefix, tags=["Campaigns"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
