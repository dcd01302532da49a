"""Shared fixtures for model-input tests."""

from __future__ import annotations

from datetime import datetime

import pytest
from sqlalchemy import (
    CHAR,
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    Interval,
    LargeBinary,
    Numeric,
    SmallInteger,
    String,
    Text,
    Time,
    Uuid,
    create_engine,
)
from sqlalchemy.orm import DeclarativeBase

from model_input.config import ModelInputSettings
from model_input.generator import InputGenerator
from model_input.providers.sql import MetadataSchemaProvider
from model_input.registry import DeclarativeModelRegistry

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9)


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False)
    nickname = Column(String(50), comment="Public display name")
    country_code = Column(CHAR(2), nullable=False)
    status = Column(String(20), nullable=False, server_default="draft")
    bio = Column(Text)
    balance = Column(Numeric(10, 2), nullable=False)
    age = Column(SmallInteger)
    is_active = Column(Boolean, nullable=False, default=True)
    birthday = Column(Date)
    last_login = Column(DateTime)
    wake_up = Column(Time)
    avatar = Column(LargeBinary)
    settings = Column(JSON)
    external_id = Column(Uuid)
    session_length = Column(Interval)


class Invoice(Base):
    __tablename__ = "invoices"
    id = Column(Integer, primary_key=True)
    total = Column(Numeric(5, 2), nullable=False)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def base() -> type[Base]:
    return Base


@pytest.fixture()
def user_model() -> type[User]:
    return User


@pytest.fixture()
def clock():
    return fixed_clock


@pytest.fixture()
def generator() -> InputGenerator:
    """Generator over the declarative models, with a fixed clock."""
    return InputGenerator(
        DeclarativeModelRegistry(Base),
        MetadataSchemaProvider(Base.metadata),
        clock=fixed_clock,
    )


@pytest.fixture()
def strict_generator() -> InputGenerator:
    return InputGenerator(
        DeclarativeModelRegistry(Base),
        MetadataSchemaProvider(Base.metadata),
        settings=ModelInputSettings(unknown_type="error"),
        clock=fixed_clock,
    )


@pytest.fixture()
def sqlite_url(tmp_path) -> str:
    """Create a SQLite database with the test tables and return its URL."""
    url = f"sqlite:///{tmp_path / 'app.db'}"
    engine = create_engine(url)
    Base.metadata.create_all(engine)
    engine.dispose()
    return url


@pytest.fixture()
def sqlite_engine(sqlite_url):
    engine = create_engine(sqlite_url)
    yield engine
    engine.dispose()
