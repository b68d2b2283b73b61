"""
Password Manager API - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Set testing environment
TEST_ENCRYPTION_KEY = "YWFhYWFhYWFhYWFhYWFhYWFhYWFhYWFhYWFhYWFhYWE="

os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///./test_password_manager.db'
os.environ['ENCRYPTION_KEY'] = TEST_ENCRYPTION_KEY
os.environ['CLIENT_TABLE'] = 'Client'
os.environ['PASSWORD_TABLE'] = 'Password'

from app.main import app
from app.adapters.outbound.persistence.database import build_engine, create_tables, get_db
from app.adapters.outbound.persistence.item_store import SQLAlchemyItemStore
from app.adapters.outbound.security.crypto import FernetCrypto

KEY_ATTRIBUTES = {"Client": "clientId", "Password": "passwordId"}


@pytest.fixture
async def db_engine(tmp_path):
    """Engine on a fresh SQLite file for each test"""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'items.db'}")
    await create_tables(bind=engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test"""
    session_factory = async_sessionmaker(bind=db_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def item_store(db_session: AsyncSession) -> SQLAlchemyItemStore:
    """Item store over the test session"""
    return SQLAlchemyItemStore(db_session, KEY_ATTRIBUTES)


@pytest.fixture
def mock_store():
    """Item store double whose calls can be inspected"""
    store = MagicMock()
    store.get = AsyncMock(return_value={"Item": None})
    store.query = AsyncMock(return_value={"Items": []})
    store.save = AsyncMock(return_value=None)
    store.update = AsyncMock(return_value=None)
    store.delete = AsyncMock(return_value=None)
    store.batch_delete = AsyncMock(return_value=None)
    return store


@pytest.fixture
def crypto() -> FernetCrypto:
    """Real Fernet crypto with the test key"""
    return FernetCrypto(TEST_ENCRYPTION_KEY)


@pytest.fixture
def fake_crypto():
    """Crypto double that wraps values as enc(<value>)"""
    double = MagicMock()
    double.encrypt.side_effect = lambda value: f"enc({value})"
    double.decrypt.side_effect = lambda value: value[4:-1]
    return double


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def api_client() -> AsyncGenerator[AsyncClient, None]:
    """Test client without database; tests override the services they need"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()
