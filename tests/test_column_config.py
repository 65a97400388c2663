from report_console.core.column_config import get_columns, load_column_sets
from report_console.core.config import DISPLAY_ORDER_TABLE


def test_column_sets_load():
    sets = load_column_sets(reload=True)
    assert set(sets) == {"table", "export"}
    assert get_columns("table")[0] == "selected"
    assert "description" in get_columns("export")
    assert get_columns("nope") == []


def test_unreadable_yaml_falls_back_to_defaults(tmp_path):
    (tmp_path / "columns.yaml").write_text("sets: [unclosed\n")
    try:
        sets = load_column_sets(tmp_path, reload=True)
        assert sets["table"] == list(DISPLAY_ORDER_TABLE)
    finally:
        load_column_sets(reload=True)
