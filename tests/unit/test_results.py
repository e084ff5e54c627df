"""Tests for the wire models."""

import pytest

from gridui.core.exceptions import HostError, ResultPayloadError
from gridui.models import BlockDefinition, BlockType, GridDescription, UIResults


class TestUIResults:
    """Decoding and accessors of host answers."""

    @pytest.mark.unit
    def test_from_json(self):
        payload = (
            b'{"values": {"box": "hello", "flag": " TRUE "},'
            b' "checked_items": {"tree": ["a", "b"]},'
            b' "expanded_items": {"tree": ["a"]},'
            b' "trigger": "ok", "back": false, "forward": true}'
        )

        results = UIResults.from_json(payload)

        assert results.get_string("box") == "hello"
        assert results.get_string("missing") is None
        assert results.get_checked("flag")
        assert not results.get_checked("box")
        assert results.get_checked_item_keys("tree") == ["a", "b"]
        assert results.get_expanded_item_keys("tree") == ["a"]
        assert results.get_checked_item_keys("other") == []
        assert results.was_button_pressed("ok")
        assert not results.was_button_pressed("box")
        assert results.was_forward() and not results.was_back()

    @pytest.mark.unit
    def test_empty_object_is_valid(self):
        results = UIResults.from_json("{}")
        assert results.trigger is None
        assert results.values == {}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "payload",
        ["", "null", "[]", '{"back": "maybe"}', '{"checked_items": {"t": "a"}}'],
    )
    def test_invalid_payloads(self, payload):
        """Payload errors are host errors."""
        with pytest.raises(ResultPayloadError) as exc_info:
            UIResults.from_json(payload)
        assert isinstance(exc_info.value, HostError)

    @pytest.mark.unit
    def test_accessors_return_copies(self):
        results = UIResults(checked_items={"tree": ["a"]})
        results.get_checked_item_keys("tree").append("b")
        assert results.checked_items["tree"] == ["a"]


class TestGridDescription:
    """Outgoing description model."""

    @pytest.mark.unit
    def test_counts_follow_definitions(self, empty_description):
        assert empty_description.row_count == 0
        description = GridDescription(row_defs="auto;40", column_defs="*")
        assert (description.row_count, description.column_count) == (2, 1)

    @pytest.mark.unit
    def test_find_block(self):
        block = BlockDefinition(type=BlockType.TEXT_BOX, dest_var="wgt_1")
        description = GridDescription(blocks=[BlockDefinition(type=BlockType.LABEL), block])
        assert description.find_block("wgt_1") is block
        assert description.find_block("wgt_2") is None

    @pytest.mark.unit
    def test_json_dump_uses_wire_names(self):
        data = BlockDefinition(type=BlockType.CALENDAR).model_dump(mode="json")
        assert data["type"] == "Calendar"
        assert data["margin"] == "4;4;4;4"
