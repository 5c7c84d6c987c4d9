"""State machine that steps through a drill session."""
import logging
from typing import Optional

from phonicsdrill.models.drill_models import DrillState, Session, WordRecord
from phonicsdrill.services.mastery_store import MasteryStore
from phonicsdrill.services.session_builder import SessionBuilder
from phonicsdrill import monitoring

logger = logging.getLogger(__name__)


class DrillController:
    """Drives one session at a time: Idle -> AwaitingJudgment -> Finished.

    The controller owns the current session and keeps it after it finishes
    so the results view can replay it or reset its progress.
    """

    def __init__(self, store: MasteryStore, builder: SessionBuilder):
        self.store = store
        self.builder = builder
        self.state = DrillState.IDLE
        self.session: Optional[Session] = None

    @property
    def current_word(self) -> Optional[WordRecord]:
        """The word awaiting a judgment, if any."""
        if self.state is not DrillState.AWAITING_JUDGMENT:
            return None
        return self.session.current_word

    @property
    def current_index(self) -> Optional[int]:
        if self.state is not DrillState.AWAITING_JUDGMENT:
            return None
        return self.session.cursor

    @property
    def show_icon(self) -> bool:
        """Whether the current word gets alien art."""
        word = self.current_word
        return word is not None and self.session.show_icon(word)

    def start(self, session: Session) -> DrillState:
        """Start a session from its first word."""
        session.cursor = 0
        self.session = session
        monitoring.sessions_started.labels(mode=session.mode.value).inc()
        logger.info(f"Starting {session.mode.value} session with {len(session)} words")
        if session.is_complete:
            self._finish()
        else:
            self.state = DrillState.AWAITING_JUDGMENT
        return self.state

    def start_weekly(self, level, week) -> DrillState:
        return self.start(self.builder.build_weekly(level, week))

    def start_practice(self) -> DrillState:
        return self.start(self.builder.build_practice())

    def judge(self, correct: bool) -> bool:
        """Record a judgment for the current word and move on.

        Returns False without recording anything when no word is awaiting
        a judgment.
        """
        if self.state is not DrillState.AWAITING_JUDGMENT:
            logger.debug(f"Ignoring judgment in state {self.state.value}")
            return False

        word = self.session.current_word
        self.store.record_judgment(word.key, correct)
        self.session.advance()
        if self.session.is_complete:
            self._finish()
        return True

    def _finish(self) -> None:
        self.state = DrillState.FINISHED
        monitoring.sessions_finished.labels(mode=self.session.mode.value).inc()
        logger.info(f"Session finished ({len(self.session)} words)")

    def replay(self) -> Optional[DrillState]:
        """Rebuild the last session from the same parameters and start it."""
        if self.session is None:
            logger.info("No session available to replay")
            return None
        return self.start(self.builder.build(self.session.request))

    def reset_session_progress(self) -> Optional[int]:
        """Reset the level and week of the last session's first word.

        Returns the number of removed scores, or None when there is no
        session data to reset or the first word has no level and week.
        """
        if self.session is None or len(self.session) == 0:
            logger.info("No session data available to reset")
            return None
        first = self.session.words[0]
        if first.level is None or first.week is None:
            logger.info(f"Cannot reset progress: {first.word!r} has no level/week")
            return None
        return self.store.reset_range(first.level, first.week)

    def reset_all_progress(self) -> int:
        return self.store.reset_all()
