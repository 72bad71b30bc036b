# tests/conftest.py
"""Shared fixtures. Points the app at an in-memory SQLite store before anything imports it."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"   # minimum cost, keeps the suite fast

import pytest
from fastapi.testclient import TestClient
from app.database import Base, SessionLocal, create_tables, engine
from app.main import app


@pytest.fixture(autouse=True)
def fresh_tables():
    create_tables()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
