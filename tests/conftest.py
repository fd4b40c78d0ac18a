"""
Shared fixtures: in-memory SQLite database and a test client
"""
import os

# Must be set before the settings module is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("METRICS_ENABLED", "false")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from insect_shop.config import Settings
from insect_shop.database import Database
from insect_shop.main import create_app
from insect_shop.repositories import InsectRepository, OrderRepository, UserRepository


@pytest.fixture
def database():
    database = Database("sqlite://")
    database.init_db()
    yield database
    database.drop_db()
    database.dispose()


@pytest.fixture
def db(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def insect_repository(db):
    return InsectRepository(db)


@pytest.fixture
def order_repository(db):
    return OrderRepository(db, tax_rate=0.10)


@pytest.fixture
def user_repository(db):
    return UserRepository(db, work_factor=4)


@pytest.fixture
def insects(insect_repository):
    """Three listings: beetle 10.00, cricket 5.00, mantis 25.50"""
    return [
        insect_repository.create({"species": "Stag Beetle", "price": 10.00, "image_url": "http://img/beetle.jpg"}),
        insect_repository.create({"species": "Cricket", "price": 5.00, "image_url": "http://img/cricket.jpg"}),
        insect_repository.create({"species": "Praying Mantis", "price": 25.50, "image_url": "http://img/mantis.jpg"}),
    ]


@pytest.fixture
def user(user_repository):
    return user_repository.register({
        "username": "noah",
        "password": "password1",
        "email": "noah@example.com",
        "isAdmin": False,
    })


@pytest.fixture
def submit_time():
    return datetime(2024, 3, 1, 12, 30, 0)


@pytest.fixture
def client(database):
    settings = Settings(DATABASE_URL="sqlite://", METRICS_ENABLED=False, BCRYPT_WORK_FACTOR=4)
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client
