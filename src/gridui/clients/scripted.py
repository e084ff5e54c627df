"""In-memory host answering from a queue of prepared results."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Union

from ..core import get_logger
from ..core.exceptions import HostError
from ..models.blocks import GridDescription
from ..models.results import UIResults

logger = get_logger(__name__)

Response = Union[UIResults, Callable[[GridDescription], UIResults]]


class ScriptedHost:
    """
    Host for tests and headless runs.

    Every description and progress text is recorded. Blocking rounds are
    answered from ``responses`` in order; a callable response receives the
    description, which lets it look up the keys of the widgets it answers for.
    """

    def __init__(self, responses: Iterable[Response] = ()) -> None:
        self._responses: deque[Response] = deque(responses)
        self.shown: list[GridDescription] = []
        self.progress: list[str] = []

    def queue(self, response: Response) -> None:
        self._responses.append(response)

    @property
    def remaining(self) -> int:
        return len(self._responses)

    @property
    def last_shown(self) -> GridDescription | None:
        return self.shown[-1] if self.shown else None

    def show_ui(self, description: GridDescription) -> UIResults | None:
        self.shown.append(description)
        if not description.require_response:
            return None

        if not self._responses:
            logger.error("scripted_host_exhausted", shown=len(self.shown))
            raise HostError("Scripted host has no response left")

        response = self._responses.popleft()
        return response(description) if callable(response) else response

    def show_progress(self, text: str) -> None:
        self.progress.append(text)
