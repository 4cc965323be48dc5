import pytest

from iccfix.correction import (
    MAX_LINE_LENGTH,
    LineTooLongError,
    copy_text_file,
    correct_file,
    parse_header,
    parse_record,
)
from iccfix.formatting import Record, format_general_level, format_items

HEADER = '"periodo";"nivel_general_aperturas";"indice_icc"\n'


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def _read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_parse_header_returns_names():
    assert parse_header('"periodo";"nivel";"indice"') == ("periodo", "nivel", "indice")


def test_parse_header_rejects_unquoted():
    with pytest.raises(ValueError):
        parse_header("periodo;nivel;indice")


def test_parse_record_fields():
    record = parse_record('"1/2/2020";"abc";12,5')
    assert record == Record(period="1/2/2020", level="abc", index="12,5")


def test_parse_record_index_stops_at_semicolon():
    assert parse_record('"1/2/2020";"abc";12,5;"extra"').index == "12,5"


def test_parse_record_rejects_missing_level():
    with pytest.raises(ValueError):
        parse_record('"1/2/2020";;12,5')


def test_correct_general_file(tmp_path):
    data = '"01/02/2020";"jgrch_ccjcnyh";"123,4"'
    path = _write(tmp_path / "general.csv", HEADER + '"01/02/2020";"jgrch_ccjcnyh";123,4\n')
    correct_file(path, format_general_level)
    lines = _read_lines(path)
    assert lines[0] == '"periodo";"nivel_general_aperturas";"indice_icc";"Clasificador"'
    assert len(lines) == 2
    assert lines[1] == '"2020-02-01";"Nivel general";123.4;"Nivel general"'
    assert data.startswith('"01/02/2020"')


def test_correct_general_file_matches_formatter(tmp_path):
    row = '"5/11/2019";"abcd_efg";98,76'
    path = _write(tmp_path / "general.csv", HEADER + row + "\n")
    correct_file(path, format_general_level)
    expected = format_general_level(parse_record(row))
    corrected = _read_lines(path)[1]
    assert parse_record(corrected) == Record(expected.period, expected.level, expected.index)
    assert corrected.endswith('"Capítulos"')


def test_correct_file_processes_last_unterminated_line(tmp_path):
    rows = ['"1/1/2020";"abc";1,0', '"2/1/2020";"abd";2,0']
    path = _write(tmp_path / "general.csv", HEADER + "\n".join(rows))
    correct_file(path, format_general_level)
    assert len(_read_lines(path)) == len(rows) + 1


def test_correct_file_long_line_leaves_file_untouched(tmp_path):
    original = HEADER + '"1/1/2020";"' + "a" * MAX_LINE_LENGTH + '";1,0\n'
    path = _write(tmp_path / "general.csv", original)
    with pytest.raises(LineTooLongError):
        correct_file(path, format_general_level)
    assert path.read_text(encoding="utf-8") == original
    assert sorted(p.name for p in tmp_path.iterdir()) == ["general.csv"]


def test_correct_file_header_without_newline(tmp_path):
    path = _write(tmp_path / "general.csv", HEADER.rstrip("\n"))
    with pytest.raises(LineTooLongError):
        correct_file(path, format_general_level)


def test_correct_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        correct_file(tmp_path / "absent.csv", format_items)


def test_copy_text_file_round_trip(tmp_path):
    text = HEADER + '"1/1/2020";"abc";1,0\n"2/1/2020";"abd";2,0\n'
    source = _write(tmp_path / "source.csv", text)
    dest = tmp_path / "dest.csv"
    copy_text_file(dest, source)
    assert dest.read_text(encoding="utf-8") == text


def test_copy_text_file_accepts_longest_first_line(tmp_path):
    text = "x" * MAX_LINE_LENGTH + "\n"
    source = _write(tmp_path / "source.txt", text)
    dest = tmp_path / "dest.txt"
    copy_text_file(dest, source)
    assert dest.read_text(encoding="utf-8") == text


def test_copy_text_file_rejects_long_first_line(tmp_path):
    source = _write(tmp_path / "source.txt", "x" * (MAX_LINE_LENGTH + 1) + "\n")
    with pytest.raises(LineTooLongError):
        copy_text_file(tmp_path / "dest.txt", source)


def test_copy_text_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_text_file(tmp_path / "dest.txt", tmp_path / "absent.txt")