"""Builds drill sessions from the catalog."""
import logging

from phonicsdrill.models.drill_models import DrillMode, Session, SessionRequest
from phonicsdrill.services.catalog_service import Catalog

logger = logging.getLogger(__name__)


class SessionBuilder:
    """Selects catalog words for a session."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def build(self, request: SessionRequest) -> Session:
        """Build a session for a weekly selection or for the whole catalog."""
        if request.mode is DrillMode.PRACTICE_ALL:
            words = self.catalog.records
        else:
            words = tuple(self.catalog.words_for(request.level, request.week))

        if not words:
            logger.info(f"No words for level {request.level}, week {request.week}")
        return Session(words=tuple(words), request=request)

    def build_weekly(self, level, week) -> Session:
        return self.build(SessionRequest.weekly(level, week))

    def build_practice(self) -> Session:
        return self.build(SessionRequest.practice_all())
