"""Aggregates mastery scores into week progress and session results."""
import math
from typing import List

from phonicsdrill.models.drill_models import (
    Session,
    SessionSummary,
    WeekProgress,
    WordResult,
)
from phonicsdrill.services.catalog_service import Catalog
from phonicsdrill.services.mastery_store import MasteryStore


def round_half_up(value: float) -> int:
    """Round .5 away from zero for the non-negative values used here."""
    return math.floor(value + 0.5)


class ProgressAggregator:
    """Computes progress figures from the catalog and the mastery store."""

    def __init__(self, catalog: Catalog, store: MasteryStore):
        self.catalog = catalog
        self.store = store

    def percent_complete(self, level, week) -> float:
        """Fraction of the available stars earned for a level and week."""
        words = self.catalog.words_for(level, week)
        if not words:
            return 0.0
        earned = sum(self.store.get(w.key) for w in words)
        percent = earned / (self.store.max_score * len(words))
        return min(1.0, max(0.0, percent))

    def star_rating(self, level, week) -> int:
        return round_half_up(self.percent_complete(level, week) * self.store.max_score)

    def week_progress(self, level) -> List[WeekProgress]:
        """Star badges for every week of a level."""
        badges = []
        for week in self.catalog.weeks(level):
            percent = self.percent_complete(level, week)
            badges.append(WeekProgress(
                week=week,
                stars=round_half_up(percent * self.store.max_score),
                percent=round_half_up(percent * 100),
            ))
        return badges

    def session_summary(self, session: Session) -> SessionSummary:
        """Per-word scores of a session and how many words have any stars."""
        results = tuple(
            WordResult(record=w, score=self.store.get(w.key), show_icon=session.show_icon(w))
            for w in session.words
        )
        correct_count = sum(1 for r in results if r.score > 0)
        return SessionSummary(results=results, correct_count=correct_count, total=len(results))
