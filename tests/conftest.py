import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from thesis_admin.constants import ALL_PERMISSIONS, VIEW_THESIS
from thesis_admin.database import Base, get_db
from thesis_admin.main import app
from thesis_admin.models import Permission, Role, User
from thesis_admin.services.session_service import create_session

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(TEST_DB_URL, echo=False)
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    # Seed permissions, an all-powerful admin role, a read-only viewer role
    # and the admin user that the default client acts as
    async with TestSession() as session:
        permissions = {name: Permission(name=name) for name in ALL_PERMISSIONS}
        session.add_all(permissions.values())
        admin_role = Role(name="admin", permissions=list(permissions.values()))
        viewer_role = Role(name="viewer", permissions=[permissions[VIEW_THESIS]])
        session.add_all([admin_role, viewer_role])
        session.add(User(username="admin", email="admin@example.edu", role=admin_role))
        await session.commit()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db():
    async with TestSession() as session:
        yield session


@pytest.fixture
async def admin_user(db):
    result = await db.execute(select(User).where(User.username == "admin"))
    return result.scalar_one()


@pytest.fixture
async def auth_headers(db, admin_user):
    session = await create_session(db, admin_user.id)
    return {"Authorization": f"Bearer {session.token}"}


@pytest.fixture
async def anon_client(db):
    async def override_get_db():
        async with TestSession() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(anon_client, auth_headers):
    anon_client.headers.update(auth_headers)
    return anon_client
