"""Strict numeric CSV loading.

Every data row must hold numeric fields only. The last column is the target,
the ones before it are features. If the first non-blank line is not numeric it
is taken to be a header and skipped.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

_WHITESPACE = " \t\n\v\f\r"

_NUMBER_PREFIX = re.compile(
    r"""
    [+-]?
    (?:
        0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?
      | (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?
      | inf(?:inity)?
      | nan(?:\([0-9a-z_]*\))?
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


class CSVError(ValueError):
    """Raised when a CSV file cannot be read or holds malformed data."""


@dataclass(frozen=True)
class CSVData:
    """A rectangular table of floats; the last column is the target."""

    data: Sequence[Sequence[float]]

    def __post_init__(self) -> None:
        table = tuple(tuple(float(value) for value in row) for row in self.data)
        if table:
            width = len(table[0])
            for row in table:
                if len(row) != width:
                    raise CSVError(
                        f"inconsistent column count: expected {width}, got {len(row)}"
                    )
        object.__setattr__(self, "data", table)

    @property
    def rows(self) -> int:
        """Number of data rows."""
        return len(self.data)

    @property
    def cols(self) -> int:
        """Number of columns per row."""
        return len(self.data[0]) if self.data else 0

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self.data)

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self.data[index]


def tokenize_line(line: str) -> list[str]:
    """Split one CSV line into trimmed tokens.

    Quoted tokens lose their quotes and honour backslash escapes. A trailing
    comma yields no extra token; an empty field between commas yields "".
    """
    tokens: list[str] = []
    pos, end = 0, len(line)
    while True:
        while pos < end and line[pos] != "\n" and line[pos] in _WHITESPACE:
            pos += 1
        if pos >= end or line[pos] in "\n\r":
            return tokens

        if line[pos] == '"':
            pos += 1
            chars: list[str] = []
            while pos < end and line[pos] != '"':
                if line[pos] == "\\" and pos + 1 < end:
                    pos += 1
                chars.append(line[pos])
                pos += 1
            if pos < end:
                pos += 1
            while pos < end and line[pos] not in ",\n" and line[pos] in _WHITESPACE:
                pos += 1
            token = "".join(chars)
        else:
            stop = pos
            while stop < end and line[stop] not in ",\n\r":
                stop += 1
            token = line[pos:stop]
            pos = stop

        if pos < end and line[pos] == ",":
            pos += 1
        tokens.append(token.strip(_WHITESPACE))


def _leading_number(token: str) -> float:
    """Parse the longest numeric prefix of ``token``, as strtod does."""
    match = _NUMBER_PREFIX.match(token)
    if match is None:
        raise CSVError(f"non-numeric token encountered in data: {token!r}")
    text = match.group(0)
    unsigned = text.lstrip("+-").lower()
    sign = "-" if text.startswith("-") else ""
    if unsigned.startswith("0x"):
        return float.fromhex(text)
    if unsigned.startswith("nan"):
        return float(sign + "nan")
    return float(text)


def parse_line(line: str) -> list[float]:
    """Parse a line into floats; raise CSVError on empty or non-numeric tokens."""
    values = []
    for token in tokenize_line(line):
        if not token:
            raise CSVError("empty token encountered in data")
        values.append(_leading_number(token))
    return values


def _is_blank(line: str) -> bool:
    return not line.strip(_WHITESPACE)


def _is_numeric(line: str) -> bool:
    try:
        parse_line(line)
    except CSVError:
        return False
    return True


def read_csv_lines(lines: Iterable[str]) -> CSVData:
    """Build a CSVData from an iterable of text lines."""
    rows: list[list[float]] = []
    cols = 0
    remaining = iter(lines)

    for line in remaining:
        if _is_blank(line):
            continue
        if _is_numeric(line):
            values = parse_line(line)
            cols = len(values)
            rows.append(values)
        break

    for line in remaining:
        if _is_blank(line):
            continue
        values = parse_line(line)
        if not values:
            continue
        if cols == 0:
            cols = len(values)
        elif len(values) != cols:
            raise CSVError(
                f"inconsistent column count: expected {cols}, got {len(values)}"
            )
        rows.append(values)

    if not rows:
        raise CSVError("no numeric data rows found in file")
    return CSVData(rows)


def read_csv(filename: str | os.PathLike[str]) -> CSVData:
    """Read the CSV file at ``filename``."""
    try:
        with open(filename, encoding="utf-8", errors="replace", newline="\n") as handle:
            return read_csv_lines(handle)
    except OSError as exc:
        raise CSVError(f"cannot open {os.fspath(filename)}: {exc.strerror}") from exc