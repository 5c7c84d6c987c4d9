"""Per-word mastery scores with write-through persistence."""
import json
import logging
from typing import Dict, List, Optional

from phonicsdrill.config import settings
from phonicsdrill.exceptions import StorageError
from phonicsdrill.models.drill_models import MasteryKey, as_number
from phonicsdrill.services.storage_service import StorageService
from phonicsdrill import monitoring

logger = logging.getLogger(__name__)


class MasteryStore:
    """Maps (word, level, week) keys to a score between 0 and max_score.

    Every mutation re-persists the whole map before returning. Storage
    failures are logged and absorbed: the in-memory scores stay authoritative
    for the rest of the run.
    """

    def __init__(
        self,
        storage: StorageService,
        storage_key: Optional[str] = None,
        max_score: Optional[int] = None,
    ):
        self.storage = storage
        self.storage_key = storage_key or settings.drill.storage_key
        self.max_score = max_score if max_score is not None else settings.drill.max_score
        self._scores: Dict[MasteryKey, int] = {}

    def __len__(self) -> int:
        return len(self._scores)

    def get(self, key: MasteryKey) -> int:
        """Get the score for a key, 0 when it has never been judged."""
        return self._scores.get(key, 0)

    def scores(self) -> Dict[MasteryKey, int]:
        """Get a snapshot of all stored scores."""
        return dict(self._scores)

    def record_judgment(self, key: MasteryKey, correct: bool) -> int:
        """Move the score one step up or down, clamped to [0, max_score]."""
        score = self.get(key)
        if correct:
            score = min(self.max_score, score + 1)
        else:
            score = max(0, score - 1)
        self._scores[key] = score
        monitoring.judgments_recorded.labels(result="correct" if correct else "wrong").inc()
        logger.debug(f"Recorded {'correct' if correct else 'wrong'} for {key}: score {score}")
        self.save()
        return score

    def reset_key(self, key: MasteryKey) -> int:
        """Forget the score of a single key."""
        removed = 1 if self._scores.pop(key, None) is not None else 0
        monitoring.progress_resets.labels(scope="key").inc()
        self.save()
        return removed

    def reset_range(self, level, week) -> int:
        """Forget every score of the given level and week."""
        level = as_number(level)
        week = as_number(week)
        matching = [
            key for key in self._scores
            if level is not None and week is not None
            and key.level == level and key.week == week
        ]
        for key in matching:
            del self._scores[key]
        monitoring.progress_resets.labels(scope="week").inc()
        logger.info(f"Reset {len(matching)} scores for level {level}, week {week}")
        self.save()
        return len(matching)

    def reset_all(self) -> int:
        """Forget every score and drop the persisted copy."""
        removed = len(self._scores)
        self._scores = {}
        monitoring.progress_resets.labels(scope="all").inc()
        try:
            self.storage.remove(self.storage_key)
        except StorageError as e:
            monitoring.storage_errors.labels(operation="remove").inc()
            logger.warning(f"Failed to clear stored progress: {e}")
        logger.info(f"All progress has been reset ({removed} scores)")
        return removed

    def load(self) -> None:
        """Replace the in-memory scores with the persisted ones.

        Anything unreadable leaves the store empty.
        """
        self._scores = {}
        try:
            payload = self.storage.restore(self.storage_key)
        except StorageError as e:
            monitoring.storage_errors.labels(operation="restore").inc()
            logger.warning(f"Failed to load progress: {e}")
            return

        if payload is None:
            logger.info("No previous progress found")
            return

        try:
            self._scores = self.deserialize(payload)
        except ValueError as e:
            logger.warning(f"Discarding unreadable progress: {e}")
            return
        logger.info(f"Progress loaded: {len(self._scores)} scores")

    def save(self) -> bool:
        """Persist the full map. Returns False if storage refused the write."""
        try:
            self.storage.persist(self.storage_key, self.serialize())
        except StorageError as e:
            monitoring.storage_errors.labels(operation="persist").inc()
            logger.warning(f"Save failed: {e}")
            return False
        return True

    def serialize(self) -> str:
        """Encode the scores as a JSON list of entries."""
        entries: List[dict] = [
            {"word": key.word, "level": key.level, "week": key.week, "score": score}
            for key, score in self._scores.items()
        ]
        return json.dumps(entries, ensure_ascii=False)

    def deserialize(self, payload: str) -> Dict[MasteryKey, int]:
        """Decode a JSON payload, raising ValueError if it is not a valid score map."""
        # json.JSONDecodeError is a ValueError
        try:
            entries = json.loads(payload)
        except RecursionError as e:
            raise ValueError("payload is nested too deeply") from e
        if not isinstance(entries, list):
            raise ValueError("expected a list of entries")

        scores: Dict[MasteryKey, int] = {}
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValueError(f"invalid entry {entry!r}")
            word = entry.get("word")
            score = entry.get("score")
            if not isinstance(word, str):
                raise ValueError(f"invalid word in {entry!r}")
            if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= self.max_score:
                raise ValueError(f"invalid score in {entry!r}")
            level = self._key_number(entry.get("level"))
            week = self._key_number(entry.get("week"))
            scores[MasteryKey(word, level, week)] = score
        return scores

    @staticmethod
    def _key_number(value):
        if value is None:
            return None
        number = as_number(value)
        if number is None:
            raise ValueError(f"invalid level/week {value!r}")
        return number
