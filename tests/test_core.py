# tests/test_core.py
import pytest
from chrklst.core import AppState, Message, StepStack
from chrklst.models import DONE_TEXT


# ═══════════════════════════════════════════════════════════════════
# StepStack
# ═══════════════════════════════════════════════════════════════════

def test_current_is_first_item():
    steps = StepStack(["One", "Two", "Three"])
    assert steps.current() == "One"


def test_advance_walks_front_to_back():
    steps = StepStack(["One", "Two", "Three"])
    seen = []
    while steps.current() is not None:
        seen.append(steps.current())
        steps.advance()
    assert seen == ["One", "Two", "Three"]


def test_current_does_not_mutate():
    steps = StepStack(["One", "Two"])
    assert steps.current() == steps.current() == "One"
    assert len(steps) == 2


def test_empty_stack_is_complete():
    steps = StepStack([])
    assert steps.current() is None
    assert steps.is_complete


def test_advance_past_end_is_noop():
    steps = StepStack(["only"])
    steps.advance()
    steps.advance()
    steps.advance()
    assert steps.current() is None
    assert len(steps) == 0


def test_items_are_stringified():
    steps = StepStack([1, 2.5, None])
    assert steps.remaining() == ["1", "2.5", "None"]


def test_remaining_reports_presentation_order():
    steps = StepStack(["a", "b", "c"])
    steps.advance()
    assert steps.remaining() == ["b", "c"]


def test_accepts_any_iterable():
    steps = StepStack(line for line in ["x", "y"])
    assert steps.current() == "x"


@pytest.mark.parametrize("items", [["a"], ["a", "b"], [str(i) for i in range(10)]])
def test_len_advances_reach_complete(items):
    steps = StepStack(items)
    for _ in items:
        assert not steps.is_complete
        steps.advance()
    assert steps.is_complete
    steps.advance()
    assert steps.is_complete


# ═══════════════════════════════════════════════════════════════════
# AppState
# ═══════════════════════════════════════════════════════════════════

def test_two_step_scenario():
    app = AppState.with_steps(["One", "Two"])
    assert app.message() == Message("One")
    app.next_step()
    assert app.message() == Message("Two")
    app.next_step()
    assert app.message() == Message(DONE_TEXT, done=True)
    app.next_step()
    assert app.message() == Message(DONE_TEXT, done=True)


def test_empty_checklist_starts_complete():
    app = AppState.with_steps([])
    msg = app.message()
    assert msg.text == "All done :)"
    assert msg.done


def test_default_state_is_complete():
    app = AppState()
    assert app.message().done
    assert app.exit is False


def test_step_text_is_not_done_style():
    app = AppState.with_steps(["All done :)"])
    assert app.message() == Message("All done :)", done=False)


def test_quit_sets_exit_and_stays_set():
    app = AppState.with_steps(["One"])
    app.quit()
    app.next_step()
    assert app.exit is True


def test_quit_leaves_message_alone():
    app = AppState.with_steps(["One", "Two"])
    app.quit()
    assert app.message() == Message("One")
