"""Tests for the drill controller."""
from phonicsdrill.models.drill_models import DrillState, MasteryKey, WordRecord
from phonicsdrill.services.catalog_service import Catalog
from phonicsdrill.services.drill_controller import DrillController
from phonicsdrill.services.mastery_store import MasteryStore
from phonicsdrill.services.session_builder import SessionBuilder


def test_initial_state(controller: DrillController) -> None:
    """Test the idle controller."""
    assert controller.state is DrillState.IDLE
    assert controller.current_word is None
    assert controller.judge(True) is False


def test_empty_session_finishes_immediately(controller: DrillController, store: MasteryStore, mocker) -> None:
    """Test that an empty week needs no judgments."""
    record = mocker.spy(store, "record_judgment")

    assert controller.start_weekly(5, 5) is DrillState.FINISHED
    assert controller.current_word is None
    assert controller.judge(True) is False
    record.assert_not_called()


def test_judging_every_word(controller: DrillController, store: MasteryStore, mocker) -> None:
    """Test stepping through a session exactly once per word."""
    record = mocker.spy(store, "record_judgment")

    assert controller.start_weekly(1, 1) is DrillState.AWAITING_JUDGMENT
    assert controller.current_index == 0
    assert controller.current_word.word == "cat"

    assert controller.judge(True)
    assert controller.current_index == 1
    assert controller.current_word.word == "sat"
    assert controller.judge(False)
    assert controller.judge(True)

    assert controller.state is DrillState.FINISHED
    assert controller.session.cursor == len(controller.session)

    # Extra judgments after the end are ignored
    assert controller.judge(True) is False
    assert controller.judge(False) is False

    assert record.call_count == 3
    assert [c.args[0] for c in record.call_args_list] == [
        MasteryKey("cat", 1, 1),
        MasteryKey("sat", 1, 1),
        MasteryKey("mip", 1, 1),
    ]
    assert store.get(MasteryKey("cat", 1, 1)) == 1
    assert store.get(MasteryKey("sat", 1, 1)) == 0


def test_show_icon(controller: DrillController) -> None:
    """Test alien art in weekly mode and its suppression in practice mode."""
    controller.start_weekly(1, 1)
    assert not controller.show_icon
    controller.judge(True)
    controller.judge(True)
    assert controller.current_word.word == "mip"
    assert controller.show_icon

    controller.start_practice()
    while controller.state is DrillState.AWAITING_JUDGMENT:
        assert not controller.show_icon
        controller.judge(True)


def test_practice_writes_each_words_own_key(
    controller: DrillController, store: MasteryStore, catalog: Catalog
) -> None:
    """Test that practice judgments land under each word's level and week."""
    controller.start_practice()
    assert len(controller.session) == len(catalog)

    while controller.state is DrillState.AWAITING_JUDGMENT:
        controller.judge(True)

    assert store.scores() == {record.key: 1 for record in catalog}


def test_finished_session_is_kept(controller: DrillController) -> None:
    """Test that the finished session stays available for the results view."""
    controller.start_weekly(1, 2)
    controller.judge(True)

    assert controller.state is DrillState.FINISHED
    assert [w.word for w in controller.session.words] == ["dog"]


def test_replay_rebuilds_same_session(controller: DrillController, store: MasteryStore) -> None:
    """Test replaying a finished weekly session."""
    controller.start_weekly(2, 3)
    controller.judge(True)
    controller.judge(True)
    first = controller.session

    assert controller.replay() is DrillState.AWAITING_JUDGMENT
    assert controller.session is not first
    assert controller.session.words == first.words
    assert controller.current_index == 0

    controller.judge(True)
    assert store.get(MasteryKey("ship", 2, 3)) == 2


def test_replay_practice_session(controller: DrillController, catalog: Catalog) -> None:
    """Test that practice sessions replay in practice mode."""
    controller.start_practice()
    controller.replay()
    assert controller.session.is_practice
    assert len(controller.session) == len(catalog)


def test_replay_without_session(controller: DrillController) -> None:
    """Test that replay needs a previous session."""
    assert controller.replay() is None
    assert controller.state is DrillState.IDLE


def test_reset_session_progress(controller: DrillController, store: MasteryStore) -> None:
    """Test resetting the week of the session that just finished."""
    store.record_judgment(MasteryKey("rain", 2, 4), True)
    controller.start_weekly(2, 3)
    controller.judge(True)
    controller.judge(True)

    assert controller.reset_session_progress() == 2
    assert store.scores() == {MasteryKey("rain", 2, 4): 1}


def test_reset_session_progress_without_data(controller: DrillController) -> None:
    """Test that there is nothing to reset before or after an empty session."""
    assert controller.reset_session_progress() is None
    controller.start_weekly(9, 9)
    assert controller.reset_session_progress() is None


def test_reset_all_progress(controller: DrillController, store: MasteryStore) -> None:
    """Test the bulk reset."""
    controller.start_weekly(1, 1)
    controller.judge(True)
    assert controller.reset_all_progress() == 1
    assert store.scores() == {}


def test_reset_session_progress_first_word_without_level(store: MasteryStore) -> None:
    """Test that a session led by a word without level/week has nothing to reset."""
    catalog = Catalog([WordRecord("odd", None, None), WordRecord("cat", 1, 1)])
    controller = DrillController(store, SessionBuilder(catalog))
    controller.start_practice()
    controller.judge(True)
    controller.judge(True)

    assert controller.reset_session_progress() is None
    assert store.scores() == {MasteryKey("odd", None, None): 1, MasteryKey("cat", 1, 1): 1}
