"""Rewriting of semicolon-separated ICC index files."""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Callable, TextIO

from iccfix.formatting import Record

BUFFER_SIZE = 255
# A line plus its newline and terminator has to fit in the read buffer.
MAX_LINE_LENGTH = BUFFER_SIZE - 2

CLASSIFIER_FIELD = "Clasificador"
ENCODING = "utf-8"

_HEADER = re.compile(r'"([^"]+)";"([^"]+)";"([^"]+)"')
_RECORD = re.compile(r'"([^"]+)";"([^"]+)";([^;]+)')

Formatter = Callable[[Record], Record]


class LineTooLongError(ValueError):
    """A line does not end within the allowed length."""


def parse_header(line: str) -> tuple[str, str, str]:
    """Return the three quoted column names of a header line."""
    match = _HEADER.match(line)
    if match is None:
        raise ValueError(f"malformed header: {line!r}")
    period, level, index = match.groups()
    return period, level, index


def parse_record(line: str) -> Record:
    """Return the record held by a data line."""
    match = _RECORD.match(line)
    if match is None:
        raise ValueError(f"malformed record: {line!r}")
    period, level, index = match.groups()
    return Record(period=period, level=level, index=index)


def _check_length(content: str) -> None:
    if len(content) > MAX_LINE_LENGTH:
        raise LineTooLongError(
            f"line of {len(content)} characters exceeds {MAX_LINE_LENGTH}"
        )


def _read_first_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line.endswith("\n"):
        raise LineTooLongError("first line is not terminated by a newline")
    content = line[:-1]
    _check_length(content)
    return content


def _write_corrected(source: TextIO, target: TextIO, formatter: Formatter) -> None:
    period, level, index = parse_header(_read_first_line(source))
    target.write(f'"{period}";"{level}";"{index}";"{CLASSIFIER_FIELD}"\n')
    for line in source:
        content = line[:-1] if line.endswith("\n") else line
        _check_length(content)
        if not content:
            continue
        record = formatter(parse_record(content))
        target.write(
            f'"{record.period}";"{record.level}";{record.index};"{record.classifier}"\n'
        )


def correct_file(path: str | os.PathLike[str], formatter: Formatter) -> None:
    """Rewrite the file at path with every record passed through formatter.

    The header gains a classifier column. The file is replaced only when the
    whole of it was corrected; on any error it is left untouched.
    """
    path = Path(path)
    with open(path, encoding=ENCODING) as source:
        handle, temp_name = tempfile.mkstemp(
            dir=path.parent, prefix=".auxiliar-", suffix=".tmp"
        )
        try:
            with open(handle, "w", encoding=ENCODING, newline="\n") as target:
                _write_corrected(source, target, formatter)
        except BaseException:
            os.unlink(temp_name)
            raise
    os.replace(temp_name, path)


def copy_text_file(
    dest: str | os.PathLike[str], source: str | os.PathLike[str]
) -> None:
    """Copy the text file source to dest; its first line must fit the buffer."""
    with open(source, encoding=ENCODING) as reader:
        first = _read_first_line(reader)
        rest = reader.read()
    with open(dest, "w", encoding=ENCODING, newline="\n") as writer:
        writer.write(first + "\n")
        writer.write(rest)