from chart_embed.tabular import (
    extract_gid,
    extract_sheets_id,
    infer_data_types,
    parse_csv,
    parse_data,
    parse_tsv,
    sheets_csv_url,
    validate_chart_data,
)


def test_parse_csv_quotes_and_blank_lines():
    text = 'Name,Value\n"Smith, J",2\n\n"say ""hi""", 3 \n'
    assert parse_csv(text) == [["Name", "Value"], ["Smith, J", "2"], ['say "hi"', "3"]]


def test_parse_tsv():
    assert parse_tsv("a\tb\n 1 \t2\n") == [["a", "b"], ["1", "2"]]


def test_parse_data_detects_tabs():
    assert parse_data("a\tb,c\n1\t2") == [["a", "b,c"], ["1", "2"]]
    assert parse_data("a,b\n1,2") == [["a", "b"], ["1", "2"]]


def test_validate_ok():
    assert validate_chart_data([["a", "b"], ["x", "1"]]).valid


def test_validate_empty():
    result = validate_chart_data([])
    assert not result.valid
    assert result.error == "No data provided"


def test_validate_header_only():
    result = validate_chart_data([["a", "b"]])
    assert result.error == "Data must have at least a header row and one data row"


def test_validate_no_columns():
    result = validate_chart_data([[], []])
    assert result.error == "Data must have at least one column"


def test_validate_ragged_row():
    result = validate_chart_data([["a", "b"], ["x", "1"], ["y"]])
    assert not result.valid
    assert result.error == "Row 3 has 1 columns, but header has 2 columns"


def test_infer_data_types():
    data = [
        ["Year", "Sales", "Note"],
        ["2020", "10", "ok"],
        ["2021", "12.5", ""],
        ["2022", "nan", "-3"],
    ]
    assert infer_data_types(data) == [
        ["Year", "Sales", "Note"],
        ["2020", 10, "ok"],
        ["2021", 12.5, ""],
        ["2022", "nan", -3],
    ]


def test_infer_data_types_empty():
    assert infer_data_types([]) == []


def test_extract_sheets_id():
    assert extract_sheets_id("https://docs.google.com/spreadsheets/d/1AbC-_9/edit#gid=0") == "1AbC-_9"
    assert extract_sheets_id("1AbC-_9") == "1AbC-_9"
    assert extract_sheets_id("not a sheets url") is None


def test_extract_gid():
    assert extract_gid("https://docs.google.com/spreadsheets/d/x/edit#gid=42") == "42"
    assert extract_gid("https://docs.google.com/spreadsheets/d/x/edit") is None


def test_sheets_csv_url():
    base = "https://docs.google.com/spreadsheets/d/abc/gviz/tq?tqx=out:csv"
    assert sheets_csv_url("abc") == base
    assert sheets_csv_url("abc", "7") == f"{base}&gid=7"
