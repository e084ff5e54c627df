"""
Event loop driving a sequence of dialogs.

The loop shows the current dialog, lets its handlers pick the next dialog
with :meth:`InteractiveController.show_dialog`, and repeats until
:meth:`InteractiveController.stop` is called. A handler can also request
manual mode to run long work that refreshes the display itself through
:meth:`InteractiveController.update`.
"""

from __future__ import annotations

from collections.abc import Callable

from .core import get_logger
from .core.exceptions import ControllerStateError
from .dialogs.dialog import Dialog

logger = get_logger(__name__)


class InteractiveController:
    """Runs dialogs one blocking round at a time."""

    def __init__(self) -> None:
        self.current_dialog: Dialog | None = None
        self.is_running = False
        self.is_manual_mode = False
        self._next_dialog: Dialog | None = None
        self._manual_action: Callable[[], None] | None = None

    def show_dialog(self, dialog: Dialog) -> None:
        """Show ``dialog`` in the next round."""
        self._next_dialog = dialog

    def request_manual_mode(self, action: Callable[[], None]) -> None:
        """Run ``action`` instead of the next round."""
        self._manual_action = action

    def run(self, start_dialog: Dialog) -> None:
        """
        Show dialogs until :meth:`stop` is called.

        Any exception ends the loop, resets the controller and propagates.

        Raises:
            ControllerStateError: If the loop is already running
        """
        if self.is_running:
            raise ControllerStateError("Already running")

        self._next_dialog = start_dialog
        self.is_running = True
        logger.info("controller_started", dialog=start_dialog.title)
        try:
            while self.is_running:
                if self._manual_action is not None:
                    self._run_manual_action()
                else:
                    self.current_dialog = self._next_dialog
                    self.current_dialog.show()
        except Exception:
            self.is_running = False
            self.is_manual_mode = False
            raise
        logger.info("controller_stopped")

    def update(self) -> None:
        """
        Show the next dialog without waiting for the user.

        Raises:
            ControllerStateError: Outside manual mode or before any dialog was shown
        """
        if not self.is_manual_mode:
            raise ControllerStateError("Not allowed in automatic mode")
        if self.current_dialog is None:
            raise ControllerStateError("No dialog has been set")

        self.current_dialog = self._next_dialog
        self.current_dialog.show(require_response=False)

    def stop(self) -> None:
        self.is_running = False

    def _run_manual_action(self) -> None:
        action, self._manual_action = self._manual_action, None
        self.is_manual_mode = True
        logger.info("manual_mode_entered")
        action()
        self.is_manual_mode = False
        logger.info("manual_mode_left")
