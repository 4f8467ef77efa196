import pytest

from alumni_admin.domain import DialogMode, DialogState, ListField


def test_list_field_append_returns_new_index():
    entries = ListField(["Lasers"])
    assert entries.append() == 1
    assert entries.append("Optics") == 2
    assert list(entries) == ["Lasers", "", "Optics"]


def test_list_field_remove_and_set():
    entries = ListField(["a", "b", "c"])
    assert entries.remove_at(1) == "b"
    entries.set(1, "z")
    assert entries == ["a", "z"]
    assert len(entries) == 2
    assert entries[0] == "a"


def test_list_field_remove_out_of_range_raises():
    with pytest.raises(IndexError):
        ListField().remove_at(0)


def test_list_field_pruned_drops_blank_entries():
    entries = ListField([" Lasers ", "", "   ", "Optics"])
    assert entries.pruned() == ["Lasers", "Optics"]
    # editing state keeps the blanks
    assert len(entries) == 4


def test_dialog_state_entity_id():
    assert DialogState(DialogMode.CREATE).entity_id is None
    assert DialogState(DialogMode.EDIT, {"id": 7}).entity_id == "7"
