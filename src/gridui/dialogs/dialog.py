"""
Dialog: the root panel and its submission cycle.

One round is: resolve placements, check overlaps, build the grid
description, hand it to the host, then (for blocking rounds) apply the
results to every placed interactive widget before any notification fires.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..clients.protocol import Host
from ..components.events import DialogEvent, EventHook
from ..components.interactive import InteractiveWidget
from ..core import LogContext, get_logger, get_settings
from ..core.exceptions import HostError, ValidationError
from ..core.json import safe_json_dumps
from ..core.validate import (
    AUTO,
    MAX_DIMENSION,
    DescriptionValidator,
    check_non_negative,
    check_positive,
)
from ..layout.location import WidgetLocationPair
from ..layout.overlap import check_overlaps
from ..models.blocks import BlockType, GridDescription
from ..models.results import UIResults
from ..panels.grid import GridPanel

logger = get_logger(__name__)

AUTO_SIZE = "auto"
STRETCH_SIZE = "*"


class Dialog(GridPanel):
    """
    Top-level panel shown by a host.

    Hooks:
        interacted: after every blocking round, before widget notifications
        back: the user navigated back; widget notifications are skipped
        forward: the user navigated forward; widget notifications are skipped
    """

    def __init__(
        self,
        host: Host,
        title: str = "Dialog",
        allow_overlapping_widgets: bool | None = None,
    ) -> None:
        super().__init__()
        settings = get_settings()
        self.is_root = True
        self.host = host
        self.title = title
        self.allow_overlapping_widgets = (
            settings.allow_overlapping_widgets
            if allow_overlapping_widgets is None
            else allow_overlapping_widgets
        )
        self.max_description_size = settings.max_description_size
        self.max_description_depth = settings.max_description_depth

        self._width = AUTO
        self._height = AUTO
        self._min_width = 1
        self._min_height = 1
        self._max_width = MAX_DIMENSION
        self._max_height = MAX_DIMENSION
        self._row_sizes: dict[int, str] = {}
        self._column_sizes: dict[int, str] = {}

        self.interacted: EventHook[DialogEvent] = EventHook("interacted")
        self.back: EventHook[DialogEvent] = EventHook("back")
        self.forward: EventHook[DialogEvent] = EventHook("forward")
        self.round = 0

    # ------------------------------------------------------------------
    # Sizing
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = check_positive(value, "width")

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = check_positive(value, "height")

    @property
    def min_width(self) -> int:
        return self._min_width

    @min_width.setter
    def min_width(self, value: int) -> None:
        check_positive(value, "min_width")
        if value > self._max_width:
            raise ValidationError("min_width cannot exceed max_width")
        self._min_width = value

    @property
    def max_width(self) -> int:
        return self._max_width

    @max_width.setter
    def max_width(self, value: int) -> None:
        check_positive(value, "max_width")
        if value < self._min_width:
            raise ValidationError("max_width cannot be smaller than min_width")
        self._max_width = value

    @property
    def min_height(self) -> int:
        return self._min_height

    @min_height.setter
    def min_height(self, value: int) -> None:
        check_positive(value, "min_height")
        if value > self._max_height:
            raise ValidationError("min_height cannot exceed max_height")
        self._min_height = value

    @property
    def max_height(self) -> int:
        return self._max_height

    @max_height.setter
    def max_height(self, value: int) -> None:
        check_positive(value, "max_height")
        if value < self._min_height:
            raise ValidationError("max_height cannot be smaller than min_height")
        self._max_height = value

    def set_width_auto(self) -> None:
        self._width = AUTO
        self._min_width = 1
        self._max_width = MAX_DIMENSION

    def set_height_auto(self) -> None:
        self._height = AUTO
        self._min_height = 1
        self._max_height = MAX_DIMENSION

    # ------------------------------------------------------------------
    # Row and column definitions
    # ------------------------------------------------------------------

    def set_row_height(self, row: int, height: int) -> None:
        check_non_negative(row, "row")
        self._row_sizes[row] = str(check_positive(height, "height"))

    def set_row_height_auto(self, row: int) -> None:
        self._row_sizes[check_non_negative(row, "row")] = AUTO_SIZE

    def set_row_height_stretch(self, row: int) -> None:
        self._row_sizes[check_non_negative(row, "row")] = STRETCH_SIZE

    def set_column_width(self, column: int, width: int) -> None:
        check_non_negative(column, "column")
        self._column_sizes[column] = str(check_non_negative(width, "width"))

    def set_column_width_auto(self, column: int) -> None:
        self._column_sizes[check_non_negative(column, "column")] = AUTO_SIZE

    def set_column_width_stretch(self, column: int) -> None:
        self._column_sizes[check_non_negative(column, "column")] = STRETCH_SIZE

    # ------------------------------------------------------------------
    # Widgets
    # ------------------------------------------------------------------

    def enable_all_widgets(self) -> None:
        self.enable_widgets(include_nested=True)

    def disable_all_widgets(self) -> None:
        self.disable_widgets(include_nested=True)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def build(
        self,
        require_response: bool = True,
        pairs: Iterable[WidgetLocationPair] | None = None,
    ) -> GridDescription:
        """
        Describe the dialog without contacting the host.

        Args:
            require_response: Whether the host should wait for the user
            pairs: Already resolved placements (resolved here when omitted)
        """
        placed = list(self.get_widget_location_pairs() if pairs is None else pairs)
        rows = max((pair.location.end_row for pair in placed), default=0)
        columns = max((pair.location.end_column for pair in placed), default=0)

        # Stable sort keeps registration order within a cell
        ordered = sorted(placed, key=lambda pair: (pair.location.row, pair.location.column))
        blocks = [
            pair.widget.to_block(pair.location)
            for pair in ordered
            if pair.widget.block_type != BlockType.UNDEFINED
        ]

        return GridDescription(
            title=self.title,
            width=self._width,
            height=self._height,
            min_width=self._min_width,
            min_height=self._min_height,
            max_width=self._max_width,
            max_height=self._max_height,
            row_defs=";".join(self._row_sizes.get(row, AUTO_SIZE) for row in range(rows)),
            column_defs=";".join(
                self._column_sizes.get(column, AUTO_SIZE) for column in range(columns)
            ),
            require_response=require_response,
            blocks=blocks,
        )

    def _validate(self, description: GridDescription) -> None:
        data = description.model_dump(mode="json")
        DescriptionValidator.validate(
            data,
            safe_json_dumps(data),
            max_size=self.max_description_size,
            max_depth=self.max_description_depth,
        )

    def show(self, require_response: bool = True) -> UIResults | None:
        """
        Run one round with the host.

        Args:
            require_response: False shows the dialog without waiting for the
                user (progress displays); no results are applied then

        Returns:
            The host's results, or None for a static round

        Raises:
            OverlappingWidgetsError: If visible widgets overlap and overlaps are not allowed
            ValidationError: If the description exceeds the configured limits
            HostError: If the host fails or gives no answer to a blocking round
        """
        self.round += 1
        with LogContext(dialog=self.title, round=self.round):
            pairs = list(self.get_widget_location_pairs())
            if not self.allow_overlapping_widgets:
                check_overlaps(pairs)

            description = self.build(require_response, pairs)
            self._validate(description)

            if not require_response:
                self.host.show_ui(description)
                logger.debug("dialog_static", blocks=len(description.blocks))
                return None

            logger.info(
                "dialog_shown",
                blocks=len(description.blocks),
                rows=description.row_count,
                columns=description.column_count,
            )
            results = self.host.show_ui(description)
            if results is None:
                raise HostError("Host returned no results for a dialog that requires a response")

            self.process_results(results, pairs)
            return results

    def process_results(
        self, results: UIResults, pairs: Iterable[WidgetLocationPair] | None = None
    ) -> None:
        """
        Apply ``results`` to the placed interactive widgets, then notify.

        Every widget is updated before the first notification fires. The set
        of widgets to notify is captured before any handler runs, so handlers
        may restructure the dialog.
        """
        placed = list(self.get_widget_location_pairs() if pairs is None else pairs)
        widgets = [pair.widget for pair in placed if isinstance(pair.widget, InteractiveWidget)]

        try:
            for widget in widgets:
                widget.apply_result(results)

            event = DialogEvent(self)
            self.interacted.fire(event)

            if results.was_back():
                logger.debug("navigation", direction="back")
                self.back.fire(event)
                return
            if results.was_forward():
                logger.debug("navigation", direction="forward")
                self.forward.fire(event)
                return

            flagged = [widget for widget in widgets if widget.wants_notify]
            for widget in flagged:
                widget.raise_notifications()
        finally:
            for widget in widgets:
                widget.discard_pending()
