"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker, Session
from chit_gateway.api.main import create_app
from chit_gateway.infrastructure.database.models import Base
from chit_gateway.infrastructure.database.session import build_engine, get_db
from chit_gateway.domain.models import ChitParameters


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = build_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def standard_chit() -> ChitParameters:
    """5 members, Rs 1000 before taking, Rs 1500 after (late takers gain)"""
    return ChitParameters(members_count=5, base_payment=Decimal("1000"), post_take_payment=Decimal("1500"))


@pytest.fixture
def early_takers_chit() -> ChitParameters:
    """5 members, Rs 1500 before taking, Rs 1000 after (early takers gain)"""
    return ChitParameters(members_count=5, base_payment=Decimal("1500"), post_take_payment=Decimal("1000"))


@pytest.fixture
def rosca_chit() -> ChitParameters:
    """10 members paying Rs 1000 throughout"""
    return ChitParameters(members_count=10, base_payment=Decimal("1000"), post_take_payment=Decimal("1000"))
