"""Tests for progress aggregation."""
import pytest

from phonicsdrill.models.drill_models import MasteryKey, WeekProgress, WordRecord
from phonicsdrill.services.catalog_service import Catalog
from phonicsdrill.services.mastery_store import MasteryStore
from phonicsdrill.services.progress_service import ProgressAggregator, round_half_up
from phonicsdrill.services.session_builder import SessionBuilder


def set_score(store: MasteryStore, key: MasteryKey, score: int) -> None:
    for _ in range(score):
        store.record_judgment(key, True)


def test_percent_complete_full(progress: ProgressAggregator, store: MasteryStore) -> None:
    """Test a week with both words at the top score."""
    set_score(store, MasteryKey("ship", 2, 3), 3)
    set_score(store, MasteryKey("chop", 2, 3), 3)
    assert progress.percent_complete(2, 3) == 1.0
    assert progress.star_rating(2, 3) == 3


def test_percent_complete_half(progress: ProgressAggregator, store: MasteryStore) -> None:
    """Test a week with one word at 0 and one at 3."""
    store.record_judgment(MasteryKey("ship", 2, 3), False)
    set_score(store, MasteryKey("chop", 2, 3), 3)
    assert progress.percent_complete(2, 3) == 0.5
    assert progress.star_rating(2, 3) == 2


def test_percent_complete_empty_week(progress: ProgressAggregator) -> None:
    """Test that a week without words counts as 0%."""
    assert progress.percent_complete(8, 8) == 0.0
    assert progress.star_rating(8, 8) == 0
    assert progress.percent_complete("x", 1) == 0.0


def test_percent_ignores_other_weeks(progress: ProgressAggregator, store: MasteryStore) -> None:
    """Test that scores from other weeks do not count."""
    set_score(store, MasteryKey("rain", 2, 4), 3)
    set_score(store, MasteryKey("dog", 1, 2), 3)
    assert progress.percent_complete(2, 3) == 0.0


def test_star_rating_rounds_half_up(progress: ProgressAggregator, store: MasteryStore) -> None:
    """Test that one star of three words (1/9 * 3) rounds to 0 and 5/9 rounds to 2."""
    store.record_judgment(MasteryKey("cat", 1, 1), True)
    assert progress.star_rating(1, 1) == 0

    set_score(store, MasteryKey("sat", 1, 1), 3)
    set_score(store, MasteryKey("mip", 1, 1), 1)
    assert progress.star_rating(1, 1) == 2


@pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (0.49, 0), (3.0, 3)])
def test_round_half_up(value, expected) -> None:
    assert round_half_up(value) == expected


def test_practice_judgments_feed_weekly_stars(store: MasteryStore, catalog: Catalog) -> None:
    """Test that practice sessions write through to per-week progress."""
    progress = ProgressAggregator(catalog, store)
    session = SessionBuilder(catalog).build_practice()
    for word in session.words:
        store.record_judgment(word.key, True)
    assert progress.percent_complete(1, 2) == pytest.approx(1 / 3)


def test_week_progress(progress: ProgressAggregator, store: MasteryStore) -> None:
    """Test the badges for every week of a level."""
    set_score(store, MasteryKey("ship", 2, 3), 3)
    set_score(store, MasteryKey("rain", 2, 4), 2)

    assert progress.week_progress(2) == [
        WeekProgress(week=3, stars=2, percent=50),
        WeekProgress(week=4, stars=2, percent=67),
    ]
    assert progress.week_progress(9) == []


def test_duplicate_words_stay_within_bounds(store: MasteryStore) -> None:
    """Test that repeated catalog entries share one key without exceeding 100%."""
    catalog = Catalog([WordRecord("cat", 1, 1), WordRecord("cat", 1, 1)])
    progress = ProgressAggregator(catalog, store)
    set_score(store, MasteryKey("cat", 1, 1), 3)
    assert progress.percent_complete(1, 1) == 1.0


def test_session_summary(progress: ProgressAggregator, store: MasteryStore, builder: SessionBuilder) -> None:
    """Test per-word results and the correct count."""
    set_score(store, MasteryKey("cat", 1, 1), 2)
    store.record_judgment(MasteryKey("sat", 1, 1), False)
    set_score(store, MasteryKey("mip", 1, 1), 1)

    summary = progress.session_summary(builder.build_weekly(1, 1))

    assert summary.total == 3
    assert summary.correct_count == 2
    assert [(r.record.word, r.score, r.show_icon) for r in summary.results] == [
        ("cat", 2, False),
        ("sat", 0, False),
        ("mip", 1, True),
    ]


def test_session_summary_practice_hides_icons(progress: ProgressAggregator, builder: SessionBuilder) -> None:
    """Test that practice results never show alien art."""
    summary = progress.session_summary(builder.build_practice())
    assert not any(r.show_icon for r in summary.results)
    assert summary.correct_count == 0


def test_session_summary_empty(progress: ProgressAggregator, builder: SessionBuilder) -> None:
    """Test the summary of an empty session."""
    summary = progress.session_summary(builder.build_weekly(9, 9))
    assert summary.total == 0
    assert summary.results == ()
