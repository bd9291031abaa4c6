"""Tests for the color sequencer."""

import random
from unittest.mock import Mock, call

import pytest
from pydantic import ValidationError

from ledcycle.core import ColorSequencer
from ledcycle.models import HSV


def ids(sequencer: ColorSequencer) -> list[int]:
    return [entry.id for entry in sequencer.entries]


@pytest.mark.unit
class TestInitialState:
    """Test a freshly created sequencer."""

    def test_starts_with_one_default_row(self, sequencer):
        assert len(sequencer) == 1
        entry = sequencer.entries[0]
        assert entry.id == 0
        assert entry.hsv == HSV(h=0, s=1, v=1)

    def test_first_row_is_current_and_selected(self, sequencer):
        assert sequencer.current_id == 0
        assert sequencer.selected_ids == {0}

    def test_renders_first_row(self, mock_table, mock_sliders):
        ColorSequencer(mock_table, mock_sliders)

        mock_table.clear.assert_called_once()
        mock_table.add_row.assert_called_once_with(0, "", "h: 0, s: 1, v: 1")
        mock_table.select_row.assert_called_with(0)
        mock_sliders.write_values.assert_called_with(0.0, 1.0, 1.0)


@pytest.mark.unit
class TestAddRow:
    """Test appending rows."""

    def test_ids_are_sequential(self, sequencer):
        sequencer.add_row()
        sequencer.add_row()
        assert ids(sequencer) == [0, 1, 2]

    def test_new_row_selected_exclusively(self, sequencer):
        sequencer.add_row()
        assert sequencer.current_id == 1
        assert sequencer.selected_ids == {1}

    def test_table_updates(self, mock_table):
        sequencer = ColorSequencer(mock_table)
        mock_table.reset_mock()

        sequencer.add_row()

        mock_table.add_row.assert_called_once_with(1, "", "h: 0, s: 1, v: 1")
        mock_table.deselect_row.assert_any_call(0)
        mock_table.select_row.assert_called_with(1)

    def test_ids_never_reused(self, sequencer):
        sequencer.add_row()
        sequencer.remove_selected_rows()
        sequencer.add_row()
        assert ids(sequencer) == [0, 2]


@pytest.mark.unit
class TestRemoveSelectedRows:
    """Test removing rows."""

    def test_removes_selected_row(self, sequencer):
        sequencer.add_row()
        sequencer.add_row()
        sequencer.select_row(1)

        sequencer.remove_selected_rows()

        assert ids(sequencer) == [0, 2]

    def test_current_falls_back_to_first_row(self, sequencer):
        sequencer.add_row()
        sequencer.add_row()

        sequencer.remove_selected_rows()

        assert sequencer.current_id == 0
        assert sequencer.selected_ids == {0}

    def test_emptied_list_gets_default_row(self, sequencer):
        sequencer.set_current_hue(200)

        sequencer.remove_selected_rows()

        assert len(sequencer) == 1
        entry = sequencer.entries[0]
        assert entry.id == 1
        assert entry.hsv == HSV(h=0, s=1, v=1)
        assert sequencer.current_id == 1
        assert sequencer.selected_ids == {1}

    def test_table_rerendered_deselected(self, mock_table):
        sequencer = ColorSequencer(mock_table)
        sequencer.add_row()
        sequencer.add_row()
        mock_table.reset_mock()

        sequencer.remove_selected_rows()

        mock_table.clear.assert_called_once()
        assert mock_table.add_row.call_args_list == [
            call(0, "", "h: 0, s: 1, v: 1"),
            call(1, "", "h: 0, s: 1, v: 1"),
        ]
        mock_table.deselect_row.assert_any_call(0)
        mock_table.deselect_row.assert_any_call(1)
        mock_table.select_row.assert_called_with(0)

    def test_list_never_empty(self, sequencer):
        rng = random.Random(1234)
        for _ in range(200):
            if rng.random() < 0.5:
                sequencer.add_row()
            else:
                sequencer.remove_selected_rows()
            assert len(sequencer) >= 1
            assert sequencer.current_id in ids(sequencer)


@pytest.mark.unit
class TestSelection:
    """Test selecting and deselecting rows."""

    def test_select_row(self, sequencer):
        sequencer.add_row()
        sequencer.select_row(0)
        assert sequencer.current_id == 0
        assert sequencer.selected_ids == {0}

    def test_select_updates_sliders(self, mock_sliders):
        sequencer = ColorSequencer(sliders=mock_sliders)
        sequencer.set_current_hue(120)
        sequencer.add_row()
        mock_sliders.reset_mock()

        sequencer.select_row(0)

        mock_sliders.write_values.assert_called_once_with(120.0, 1.0, 1.0)

    def test_deselect_keeps_current_row(self, sequencer):
        """Deselecting the only selected row leaves it current and selected."""
        sequencer.add_row()

        sequencer.deselect_row(1)

        assert sequencer.current_id == 1
        assert sequencer.selected_ids == {1}

    def test_deselect_then_select_other(self, sequencer):
        sequencer.add_row()
        sequencer.deselect_row(1)
        sequencer.select_row(0)
        assert sequencer.current_id == 0

    def test_select_unknown_id_keeps_current(self, sequencer):
        sequencer.add_row()
        sequencer.select_row(99)
        assert sequencer.current_id == 1
        assert sequencer.selected_ids == {1}


@pytest.mark.unit
class TestReorder:
    """Test moving rows."""

    def test_move_forward(self, sequencer):
        sequencer.add_row()
        sequencer.add_row()

        sequencer.reorder_row(0, 2)

        assert ids(sequencer) == [1, 2, 0]

    def test_move_backward(self, sequencer):
        sequencer.add_row()
        sequencer.add_row()

        sequencer.reorder_row(2, 0)

        assert ids(sequencer) == [2, 0, 1]

    def test_current_row_unchanged(self, sequencer):
        sequencer.add_row()
        sequencer.reorder_row(1, 0)
        assert sequencer.current_id == 1

    @pytest.mark.parametrize("old,new", [(-1, 0), (0, 5), (3, 0)])
    def test_out_of_range_ignored(self, sequencer, old, new):
        sequencer.add_row()
        sequencer.reorder_row(old, new)
        assert ids(sequencer) == [0, 1]

    def test_reorder_notifies(self, sequencer):
        listener = Mock()
        sequencer.add_row()
        sequencer.add_update_listener(listener)
        listener.reset_mock()

        sequencer.reorder_row(0, 1)

        listener.assert_called_once()


@pytest.mark.unit
class TestCurrentColor:
    """Test editing the current entry."""

    def test_setters(self, sequencer):
        sequencer.set_current_hue(240)
        sequencer.set_current_saturation(0.25)
        sequencer.set_current_value(0.75)
        assert sequencer.current_hsv == HSV(h=240, s=0.25, v=0.75)

    def test_only_current_entry_changes(self, sequencer):
        sequencer.add_row()
        sequencer.set_current_hue(90)
        entries = sequencer.entries
        assert entries[0].hsv.h == 0
        assert entries[1].hsv.h == 90

    def test_out_of_range_rejected(self, sequencer):
        with pytest.raises(ValidationError):
            sequencer.set_current_hue(400)

    def test_table_row_updated(self, mock_table):
        sequencer = ColorSequencer(mock_table)
        sequencer.set_current_saturation(0.5)
        mock_table.update_row.assert_called_with(0, "", "h: 0, s: 0.5, v: 1")

    def test_slider_colors(self, mock_sliders):
        sequencer = ColorSequencer(sliders=mock_sliders)
        sequencer.set_current_hue(120)
        sequencer.set_current_saturation(0.5)
        sequencer.set_current_value(0.5)

        mock_sliders.set_colors.assert_called_with("#00FF00", "#7FFF7F", "#7F7F7F")


@pytest.mark.unit
class TestListeners:
    """Test update listeners."""

    def test_called_on_registration(self, sequencer):
        listener = Mock()
        sequencer.add_update_listener(listener)
        listener.assert_called_once_with(HSV(h=0, s=1, v=1))

    def test_called_on_every_recompute(self, sequencer):
        listener = Mock()
        sequencer.add_update_listener(listener)
        listener.reset_mock()

        sequencer.set_current_hue(10)
        sequencer.set_current_hue(10)

        assert listener.call_count == 2

    def test_receives_copy(self, sequencer):
        received = []
        sequencer.add_update_listener(received.append)

        received[-1].h = 300

        assert sequencer.current_hsv.h == 0

    def test_remove_listener(self, sequencer):
        listener = Mock()
        handle = sequencer.add_update_listener(listener)
        sequencer.remove_update_listener(handle)
        listener.reset_mock()

        sequencer.add_row()

        listener.assert_not_called()

    def test_identical_listeners_removed_independently(self, sequencer):
        listener = Mock()
        first = sequencer.add_update_listener(listener)
        sequencer.add_update_listener(listener)
        sequencer.remove_update_listener(first)
        listener.reset_mock()

        sequencer.add_row()

        # add_row recomputes once, the remaining registration fires once
        listener.assert_called_once()


@pytest.mark.unit
class TestSnapshot:
    """Test snapshots of the color list."""

    def test_snapshot_is_deep_copy(self, sequencer):
        snapshot = sequencer.get_snapshot()
        snapshot[0].hsv.h = 180
        snapshot.append(snapshot[0])

        assert len(sequencer) == 1
        assert sequencer.entries[0].hsv.h == 0

    def test_snapshot_in_display_order(self, sequencer):
        sequencer.add_row()
        sequencer.add_row()
        sequencer.reorder_row(2, 0)
        assert [entry.id for entry in sequencer.get_snapshot()] == [2, 0, 1]
