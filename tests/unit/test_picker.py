"""Tests for the picker helpers."""

from fileuploader.core.value_objects import HandlerDataToReturn
from fileuploader.picker import get_picker_options, sort_handlers_by_priority

from conftest import StubHandler


def record(title, priority):
    return HandlerDataToReturn(title=title, priority=priority)


class TestSortHandlersByPriority:
    """Test cases for display ordering."""

    def test_highest_priority_first(self):
        records = [record("A", 10), record("B", 5), record("C", 20)]

        assert [r.title for r in sort_handlers_by_priority(records)] == ["C", "A", "B"]

    def test_missing_priority_last_and_stable(self):
        records = [record("A", None), record("B", 1), record("C", None), record("D", 1), record("E", -5)]

        assert [r.title for r in sort_handlers_by_priority(records)] == ["B", "D", "E", "A", "C"]

    def test_does_not_modify_input(self):
        records = [record("A", 1), record("B", 2)]

        sort_handlers_by_priority(records)

        assert [r.title for r in records] == ["A", "B"]


class TestGetPickerOptions:
    """Test cases for picker options."""

    def test_scenario_ordered_for_display(self, abc_delegate):
        options = get_picker_options(abc_delegate, ["image/jpeg"])

        assert [option.title for option in options] == ["Handler C", "Handler A"]

    def test_without_filter(self, abc_delegate):
        abc_delegate.register_handler(StubHandler("D"))

        options = get_picker_options(abc_delegate)

        assert [option.title for option in options] == ["Handler C", "Handler A", "Handler B", "Handler D"]
