"""Tests for the interactive controller loop."""

import pytest

from gridui import InteractiveController
from gridui.components import Button, Label
from gridui.core.exceptions import ControllerStateError, HostError
from gridui.dialogs import Dialog


@pytest.fixture
def controller():
    return InteractiveController()


@pytest.mark.unit
def test_run_until_stopped(controller, host, answer):
    """The loop shows dialogs until a handler stops it."""
    dialog = Dialog(host)
    done = Button("Done")
    dialog.add(done, 0, 0)
    presses = []

    @done.pressed.subscribe
    def on_done(event):
        presses.append(event)
        if len(presses) == 2:
            controller.stop()

    host.queue(answer(trigger=done))
    host.queue(answer(trigger=done))

    controller.run(dialog)

    assert len(host.shown) == 2
    assert not controller.is_running
    assert controller.current_dialog is dialog


@pytest.mark.unit
def test_handlers_switch_dialogs(controller, host, answer):
    """show_dialog picks the dialog of the next round."""
    first, second = Dialog(host, "First"), Dialog(host, "Second")
    next_button, finish_button = Button("Next"), Button("Finish")
    first.add(next_button, 0, 0)
    second.add(finish_button, 0, 0)
    next_button.pressed += lambda event: controller.show_dialog(second)
    finish_button.pressed += lambda event: controller.stop()
    host.queue(answer(trigger=next_button))
    host.queue(answer(trigger=finish_button))

    controller.run(first)

    assert [shown.title for shown in host.shown] == ["First", "Second"]
    assert controller.current_dialog is second


@pytest.mark.unit
def test_manual_mode_updates_without_blocking(controller, host, answer):
    """Manual actions refresh the display with static rounds."""
    dialog = Dialog(host)
    status = Label("working")
    start = Button("Start")
    dialog.add(status, 0, 0).add(start, 1, 0)
    modes = []

    def work():
        modes.append(controller.is_manual_mode)
        for step in range(3):
            status.text = f"step {step}"
            controller.update()
        controller.stop()

    start.pressed += lambda event: controller.request_manual_mode(work)
    host.queue(answer(trigger=start))

    controller.run(dialog)

    assert modes == [True]
    assert not controller.is_manual_mode
    assert [shown.require_response for shown in host.shown] == [True, False, False, False]
    assert host.last_shown.blocks[0].props["text"] == "step 2"


@pytest.mark.unit
def test_update_outside_manual_mode_fails(controller):
    """Static updates belong to manual mode."""
    with pytest.raises(ControllerStateError, match="automatic mode"):
        controller.update()


@pytest.mark.unit
def test_update_without_dialog_fails(controller):
    """Manual mode needs a dialog to refresh."""
    controller.is_manual_mode = True
    with pytest.raises(ControllerStateError, match="No dialog"):
        controller.update()


@pytest.mark.unit
def test_nested_run_fails(controller, host, answer):
    """The loop cannot be entered twice."""
    dialog = Dialog(host)
    button = Button()
    dialog.add(button, 0, 0)
    button.pressed += lambda event: controller.run(dialog)
    host.queue(answer(trigger=button))

    with pytest.raises(ControllerStateError, match="Already running"):
        controller.run(dialog)

    assert not controller.is_running


@pytest.mark.unit
def test_errors_reset_state(controller, host):
    """A failing round ends the loop and the error propagates."""
    with pytest.raises(HostError):
        controller.run(Dialog(host))

    assert not controller.is_running
    assert not controller.is_manual_mode


@pytest.mark.unit
def test_error_in_manual_action_leaves_manual_mode(controller, host, answer):
    """Manual mode is left even when the action fails."""
    dialog = Dialog(host)
    button = Button()
    dialog.add(button, 0, 0)
    button.pressed += lambda event: controller.request_manual_mode(lambda: 1 / 0)
    host.queue(answer(trigger=button))

    with pytest.raises(ZeroDivisionError):
        controller.run(dialog)

    assert not controller.is_manual_mode
    assert not controller.is_running
