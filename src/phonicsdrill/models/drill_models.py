"""Models for catalog words, mastery keys and drill sessions."""
import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

Number = Union[int, float]


def as_number(value) -> Optional[Number]:
    """Coerce a number-like value, returning None when it is not a usable number.

    Integral values come back as ints so that ``2``, ``2.0`` and ``"2"`` compare
    and serialize the same way.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


class WordCategory(Enum):
    """Presentation category of a catalog word."""
    NORMAL = "normal"
    ALIEN = "alien"


class MasteryKey(NamedTuple):
    """Composite identity of a word for progress purposes."""
    word: str
    level: Optional[Number]
    week: Optional[Number]


@dataclass(frozen=True)
class WordRecord:
    """A single drillable word from the catalog."""
    word: str
    level: Optional[Number]
    week: Optional[Number]
    category: WordCategory = WordCategory.NORMAL

    @property
    def key(self) -> MasteryKey:
        return MasteryKey(self.word, self.level, self.week)

    @property
    def is_alien(self) -> bool:
        return self.category is WordCategory.ALIEN

    def matches(self, level, week) -> bool:
        """Check whether the word belongs to the given level and week."""
        level = as_number(level)
        week = as_number(week)
        if level is None or week is None:
            return False
        return self.level == level and self.week == week


class DrillMode(Enum):
    """Kinds of drill sessions."""
    WEEKLY = "weekly"
    PRACTICE_ALL = "practice_all"


@dataclass(frozen=True)
class SessionRequest:
    """Parameters a session was built from; replaying rebuilds from these."""
    mode: DrillMode
    level: Optional[Number] = None
    week: Optional[Number] = None

    @classmethod
    def weekly(cls, level, week) -> "SessionRequest":
        return cls(DrillMode.WEEKLY, as_number(level), as_number(week))

    @classmethod
    def practice_all(cls) -> "SessionRequest":
        return cls(DrillMode.PRACTICE_ALL)


@dataclass
class Session:
    """One ordered run through a selection of catalog words."""
    words: Tuple[WordRecord, ...]
    request: SessionRequest
    cursor: int = 0

    def __len__(self) -> int:
        return len(self.words)

    @property
    def mode(self) -> DrillMode:
        return self.request.mode

    @property
    def is_practice(self) -> bool:
        return self.request.mode is DrillMode.PRACTICE_ALL

    @property
    def is_complete(self) -> bool:
        return self.cursor >= len(self.words)

    @property
    def current_word(self) -> Optional[WordRecord]:
        if self.is_complete:
            return None
        return self.words[self.cursor]

    def advance(self) -> None:
        """Move the cursor to the next word, never past the end."""
        self.cursor = min(self.cursor + 1, len(self.words))

    def show_icon(self, record: WordRecord) -> bool:
        """Alien art is shown for alien words outside practice mode."""
        return record.is_alien and not self.is_practice


class DrillState(Enum):
    """States of the drill controller."""
    IDLE = "idle"
    AWAITING_JUDGMENT = "awaiting_judgment"
    FINISHED = "finished"


@dataclass(frozen=True)
class WeekProgress:
    """Star badge data for one week of a level."""
    week: Number
    stars: int
    percent: int


@dataclass(frozen=True)
class WordResult:
    """Result line for one word of a finished session."""
    record: WordRecord
    score: int
    show_icon: bool


@dataclass(frozen=True)
class SessionSummary:
    """End of session results."""
    results: Tuple[WordResult, ...]
    correct_count: int
    total: int
