# iccfix

`iccfix` cleans up two CSV exports of the construction cost index (ICC).
One holds the general-level and chapter indices. The other holds the
per-item indices. Both files are semicolon-separated. They start with a
header of three quoted column names, and each data row has the form
`"period";"level";index`.

For every data row it:

- turns dates written as `d/m/yyyy` into ISO form, `yyyy-mm-dd`;
- replaces the decimal comma in the index value with a point;
- decodes the obfuscated level names and tidies them: first letter in
  capitals, underscores replaced by spaces. For item names, everything up
  to the first underscore is also dropped;
- adds a fourth column, `Clasificador`. It holds `Nivel general` or
  `Capítulos` in the general file, and `Ítems` in the items file.

## Installation

```
pip install .
```

## Command line

Run it from a directory that contains the two folders `backup/` and
`archivos/`:

```
iccfix
```

The command works in two steps. First it restores the working copies from
the originals: it copies `backup/indices_icc_general_capitulos.csv` and
`backup/Indices_items_obra.csv` into `archivos/`. Then it corrects both
copies in place.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--files-dir DIR` | `archivos` | directory of the files to correct |
| `--backup-dir DIR` | `backup` | directory of the pristine copies |
| `--general NAME` | `indices_icc_general_capitulos.csv` | name of the general-level file |
| `--items NAME` | `Indices_items_obra.csv` | name of the construction-items file |
| `--no-restore` | off | correct the files in place without restoring them first |

Exit status:

| Status | Meaning |
| --- | --- |
| 0 | success |
| 1 | a file could not be opened or written |
| 2 | a line was too long: lines may hold at most 253 characters |
| 3 | a malformed header, record or date |

## Library use

You can call each transformation on its own:

```python
from iccfix.formatting import Record, format_general_level, pad_date, fix_decimal

pad_date("1-2-2020")      # "2020-02-01"
fix_decimal("123,45")     # "123.45"

record = Record(period="1/2/2020", level="...", index="123,45")
fixed = format_general_level(record)   # a new Record with every field corrected
```

`iccfix.formatting` also provides `fix_date_separators`,
`decrypt_general_level`, `normalize_general_level`, `decrypt_items_level`,
`normalize_items_level`, `format_items` and `remove_char`.

To correct a file with one of the record formatters:

```python
from iccfix.correction import correct_file
from iccfix.formatting import format_items

correct_file("archivos/Indices_items_obra.csv", format_items)
```

`correct_file` writes its output to a temporary file in the same directory
as the file being corrected. It replaces the original only when the whole
file has been processed. If a line is too long, it raises
`iccfix.correction.LineTooLongError`. If a header or record is malformed,
it raises `ValueError`. In both cases the original file is left as it was.
Blank data lines are skipped.

`parse_header` and `parse_record` read single lines. `copy_text_file(dest,
source)` copies a text file.

`iccfix.vector.Vector` is a general-purpose growable sequence with a
capacity and a read/write cursor. It has methods to:

- add, change and remove items: `append`, `get`, `set`, `remove_last`,
  `clear`;
- move the cursor: `rewind`, `read`, `write`, `seek`, `tell`, `at_end`;
- search, sort and visit items: `find`, `sort`, `for_each`, `show`;
- load and save items as text or as fixed-size binary records: `load_text`,
  `save_text`, `load_binary`, `save_binary`. The binary methods describe
  each record with a `struct` format string.

## Tests

```
pip install ".[test]"
pytest
```