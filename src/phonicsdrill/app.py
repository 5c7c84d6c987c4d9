"""Main application wiring."""
import logging
from pathlib import Path
from typing import Optional, Union

from sqlalchemy.orm import Session as DbSession

from phonicsdrill.config import settings
from phonicsdrill.models.base import init_db, SessionLocal
from phonicsdrill.services.catalog_service import Catalog, CatalogService
from phonicsdrill.services.drill_controller import DrillController
from phonicsdrill.services.mastery_store import MasteryStore
from phonicsdrill.services.progress_service import ProgressAggregator
from phonicsdrill.services.session_builder import SessionBuilder
from phonicsdrill.services.storage_service import StorageService
from phonicsdrill.monitoring import start_monitoring


class PhonicsDrill:
    """Main application class."""

    def __init__(
        self,
        catalog_path: Optional[Union[str, Path]] = None,
        db: Optional[DbSession] = None,
    ):
        """Initialize the application."""
        self.catalog_path = catalog_path
        self.db = db
        self._owns_db = db is None
        self.catalog: Optional[Catalog] = None
        self.store: Optional[MasteryStore] = None
        self.builder: Optional[SessionBuilder] = None
        self.controller: Optional[DrillController] = None
        self.progress: Optional[ProgressAggregator] = None
        self.running = False
        self.logger = logging.getLogger(__name__)

    def start(self) -> None:
        """Load progress and the catalog; raises CatalogLoadError if the catalog is unusable."""
        if self.running:
            return

        try:
            if self.db is None:
                init_db()
                self.db = SessionLocal()
                self.logger.info("Database initialized")

            self.store = MasteryStore(StorageService(self.db))
            self.store.load()

            self.catalog = CatalogService(self.catalog_path).fetch_catalog()
            self.builder = SessionBuilder(self.catalog)
            self.controller = DrillController(self.store, self.builder)
            self.progress = ProgressAggregator(self.catalog, self.store)

            if settings.monitoring.port:
                start_monitoring(settings.monitoring.port)
                self.logger.info(f"Metrics served on port {settings.monitoring.port}")

            self.running = True
            self.logger.info("Application started")

        except Exception as e:
            self.logger.error("Failed to start application: %s", str(e))
            self.stop()
            raise

    def stop(self) -> None:
        """Release the database session."""
        if self.db is not None and self._owns_db:
            self.db.close()
            self.db = None
            self.logger.info("Database session closed")
        self.running = False
