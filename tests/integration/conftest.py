import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from telecrm.api.utils.jwt import issue_session_token
from telecrm.domain.entities import User, UserRole
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.session_cookie import cookie_header


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def app(session_factory):
    from telecrm.api.app import create_app

    return create_app(ApplicationConfig, session_factory=session_factory)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seed_user(session_factory, test_data):
    """Insert one of the users from test_data.json and return (user, cookie headers)"""

    async def seed(key: str):
        fields = test_data.get_copy("users")[key]
        fields["role"] = UserRole(fields["role"])
        async with session_factory() as session:
            user = User(**fields)
            session.add(user)
            await session.commit()
            await session.refresh(user)
        return user, cookie_header(issue_session_token(user.open_id, user.name))

    return seed
