"""
Pytest fixtures and configuration for the catalog backend tests.

Every test gets a fresh in-memory SQLite database; API tests run the real
FastAPI app with `get_session` overridden to use it.
"""
import os

# Settings are read at import time; provide them before importing the app.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "test-password")
os.environ.setdefault("ADMIN_TOKEN_SECRET", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.database import get_session
from app.main import app
from app.repositories.carousel_repo import CarouselRepository
from app.repositories.category_repo import CategoryRepository
from app.repositories.footer_repo import FooterRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.category import CategoryCreate
from app.services.carousel_service import CarouselService
from app.services.category_service import CategoryService
from app.services.footer_service import FooterService
from app.services.product_service import ProductService


@pytest.fixture(scope="function")
def engine():
    """
    Provides an in-memory SQLite engine with all tables created

    Scope: function (empty database per test)
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session(engine):
    """
    Provides a SQLModel session bound to the test engine
    """
    with Session(engine) as session:
        yield session


@pytest.fixture
def product_repo():
    return ProductRepository()


@pytest.fixture
def product_service(product_repo):
    return ProductService(product_repo, CategoryRepository(product_repo))


@pytest.fixture
def category_service(product_repo):
    return CategoryService(CategoryRepository(product_repo), product_repo)


@pytest.fixture
def carousel_service():
    return CarouselService(CarouselRepository())


@pytest.fixture
def footer_service():
    return FooterService(FooterRepository())


@pytest.fixture
def wall_panels(session, category_service):
    """
    Provides a persisted "Wall Panels" category
    """
    return category_service.create_category(
        session,
        CategoryCreate(
            name="Wall Panels",
            description="Add texture and dimension to your walls.",
        ),
    )


@pytest.fixture
def client(session):
    """
    Provides a TestClient whose requests share the test session
    """

    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    """
    Provides an Authorization header for a logged-in admin
    """
    response = client.post(
        "/api/v1/admin/login",
        json={"username": "admin", "password": "test-password"},
    )
    assert response.status_code == 200
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
