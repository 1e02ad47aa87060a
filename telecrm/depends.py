from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from telecrm.adapter.services.oauth_client import HttpOAuthClient
from telecrm.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from telecrm.app.services.oauth_client import IOAuthClient

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work(request: Request):
    """One session, and so one transaction scope, per request"""
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_oauth_client() -> IOAuthClient:
    return HttpOAuthClient(
        server_url=ApplicationConfig.OAUTH_SERVER_URL,
        app_id=ApplicationConfig.OAUTH_APP_ID,
        client_secret=ApplicationConfig.OAUTH_CLIENT_SECRET,
    )
