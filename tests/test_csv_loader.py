import io

import pytest

from restaurant_seating import InvalidArgument, SeatingManager, Table
from restaurant_seating.csv_loader import load_events, load_tables, replay


def test_load_tables_keeps_file_order(tmp_path):
    path = tmp_path / "tables.csv"
    path.write_text("name,size\nbar,2\nbooth,4\n,6\n")
    tables = load_tables(path)
    assert [t.size for t in tables] == [2, 4, 6]
    assert [t.name for t in tables] == ["bar", "booth", ""]
    assert all(t.get_empty_seats() == t.size for t in tables)


def test_load_tables_without_names():
    tables = load_tables(io.StringIO("size\n3\n5\n"))
    assert [t.size for t in tables] == [3, 5]


def test_load_tables_rejects_bad_size():
    with pytest.raises(InvalidArgument):
        load_tables(io.StringIO("name,size\nstool,1\n"))


def test_load_tables_needs_size_column():
    with pytest.raises(InvalidArgument, match="missing columns: size"):
        load_tables(io.StringIO("name,seats\nbar,2\n"))


def test_load_events_reuses_group_per_label():
    events = load_events(io.StringIO(
        "group,action,size\n"
        "Ito,arrives,3\n"
        "Ito,leaves,\n"
        "Ito,arrives,3\n"
    ))
    assert [e.action for e in events] == ["arrives", "leaves", "arrives"]
    assert events[0].group is events[1].group is events[2].group
    assert events[0].group.size == 3
    assert events[0].group.name == "Ito"


def test_load_events_action_is_case_insensitive():
    events = load_events(io.StringIO("group,action,size\nA,Arrives,2\n"))
    assert events[0].action == "arrives"


@pytest.mark.parametrize(
    "body, message",
    [
        ("A,sits,2\n", "unknown action"),
        ("A,leaves,2\n", "leaves before arriving"),
        ("A,arrives,\n", "needs a size"),
        ("A,arrives,2\nA,leaves,3\n", "earlier rows say 2"),
        ("A,arrives,2.5\n", "not a whole number"),
        ("A,arrives,two\n", "not a number"),
        ("A,arrives,9\n", "group size must be between 1 and 6"),
    ],
)
def test_load_events_rejects_bad_rows(body, message):
    with pytest.raises(InvalidArgument, match=message):
        load_events(io.StringIO("group,action,size\n" + body))


def test_replay_applies_events_in_order():
    table = Table(4)
    manager = SeatingManager([table])
    events = load_events(io.StringIO(
        "group,action,size\n"
        "A,arrives,4\n"
        "B,arrives,2\n"
        "A,leaves,\n"
    ))
    replay(manager, events)
    b = events[1].group
    assert manager.locate(b) is table
    assert manager.waiting_list == ()
    assert table.get_empty_seats() == 2


@pytest.mark.parametrize("loader", [load_tables, load_events])
def test_empty_file_is_rejected(loader):
    with pytest.raises(InvalidArgument, match="could not be read"):
        loader(io.StringIO(""))


def test_rows_wider_than_header_are_rejected():
    with pytest.raises(InvalidArgument, match="more fields than the header"):
        load_events(io.StringIO("group,action,size\nA,arrives,2,extra,more\n"))


def test_ragged_later_row_is_rejected():
    with pytest.raises(InvalidArgument, match="could not be read"):
        load_tables(io.StringIO("name,size\nbar,2\nbooth,4,extra,more\n"))


def test_line_numbers_count_from_header():
    with pytest.raises(InvalidArgument, match="line 3: unknown action"):
        load_events(io.StringIO("group,action,size\nA,arrives,2\nB,dances,2\n"))


def test_header_only_events_file_is_empty():
    assert load_events(io.StringIO("group,action,size\n")) == []
