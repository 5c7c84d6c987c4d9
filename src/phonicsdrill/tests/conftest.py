"""Test configuration."""
import os
from pathlib import Path
from typing import Generator, List

import pytest
from dotenv import load_dotenv

# Set test environment before any imports
os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Load test environment variables
test_env_path = Path(__file__).parent.parent.parent.parent / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from phonicsdrill.models.base import init_db
from phonicsdrill.models.drill_models import WordCategory, WordRecord
from phonicsdrill.services.catalog_service import Catalog
from phonicsdrill.services.drill_controller import DrillController
from phonicsdrill.services.mastery_store import MasteryStore
from phonicsdrill.services.progress_service import ProgressAggregator
from phonicsdrill.services.session_builder import SessionBuilder
from phonicsdrill.services.storage_service import StorageService


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create a fresh in-memory database session for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def storage(db: Session) -> StorageService:
    return StorageService(db)


@pytest.fixture
def store(storage: StorageService) -> MasteryStore:
    return MasteryStore(storage, storage_key="phonicsAttempts", max_score=3)


@pytest.fixture
def records() -> List[WordRecord]:
    """A small catalog spread over two levels."""
    return [
        WordRecord("cat", 1, 1),
        WordRecord("sat", 1, 1),
        WordRecord("mip", 1, 1, WordCategory.ALIEN),
        WordRecord("dog", 1, 2),
        WordRecord("ship", 2, 3),
        WordRecord("chop", 2, 3, WordCategory.ALIEN),
        WordRecord("rain", 2, 4),
    ]


@pytest.fixture
def catalog(records: List[WordRecord]) -> Catalog:
    return Catalog(records)


@pytest.fixture
def builder(catalog: Catalog) -> SessionBuilder:
    return SessionBuilder(catalog)


@pytest.fixture
def controller(store: MasteryStore, builder: SessionBuilder) -> DrillController:
    return DrillController(store, builder)


@pytest.fixture
def progress(catalog: Catalog, store: MasteryStore) -> ProgressAggregator:
    return ProgressAggregator(catalog, store)
