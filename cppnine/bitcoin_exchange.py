"""Bitcoin exchange: value amounts of bitcoin at historical exchange rates."""

from __future__ import annotations

import bisect
import math
import re
import struct
import sys
from typing import TextIO

DATABASE_PATH = "data.csv"

_STREAM_WHITESPACE = " \t\n\v\f\r"
_REMOVED_WHITESPACE = frozenset(" \t\r\f\v")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _to_float32(value: float) -> float:
    """Round a value to single precision; raise OverflowError if out of range."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _mul_float32(a: float, b: float) -> float:
    try:
        return _to_float32(a * b)
    except OverflowError:
        return math.copysign(math.inf, a * b)


def _format_number(value: float) -> str:
    return f"{value:g}"


def _leading_int(text: str) -> int | None:
    match = _INT_RE.match(text.lstrip(_STREAM_WHITESPACE))
    return int(match.group()) if match else None


def _read_lines(path) -> list[str]:
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        content = handle.read()
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def parse_value(text: str, err: TextIO | None = None) -> float:
    """Parse a number that must fill the whole text; report and return 0 otherwise."""
    stream = err if err is not None else sys.stderr
    body = text.lstrip(_STREAM_WHITESPACE)
    match = _FLOAT_RE.match(body)
    if match and match.end() == len(body):
        try:
            return _to_float32(float(match.group()))
        except OverflowError:
            pass
    print(f"Error: Invalid price format -> {text}", file=stream)
    return 0.0


def remove_whitespace(text: str) -> str:
    """Drop spaces, tabs, carriage returns, form feeds and vertical tabs."""
    return "".join(ch for ch in text if ch not in _REMOVED_WHITESPACE)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(date: str) -> bool:
    """Check a YYYY-MM-DD date from 2009 onwards."""
    if len(date) != 10 or date[4] != "-" or date[7] != "-":
        return False
    year = _leading_int(date[0:4])
    month = _leading_int(date[5:7])
    day = _leading_int(date[8:10])
    if year is None or month is None or day is None:
        return False
    if year < 2009 or not 1 <= month <= 12:
        return False
    days = _DAYS_IN_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        days = 29
    return 1 <= day <= days


def check_amount(amount: float, err: TextIO | None = None) -> bool:
    """Accept amounts between 0 and 1000, reporting anything else."""
    stream = err if err is not None else sys.stderr
    if amount < 0:
        print("Error: not a positive number.", file=stream)
        return False
    if amount > 1000:
        print("Error: too large a number.", file=stream)
        return False
    return True


class BitcoinExchange:
    """A table of exchange rates by date."""

    def __init__(self, err: TextIO | None = None) -> None:
        self.database: dict[str, float] = {}
        self._dates: list[str] = []
        self._err = err

    def _error_stream(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _insert(self, date: str, rate: float) -> None:
        if date in self.database:
            return
        self.database[date] = rate
        bisect.insort(self._dates, date)

    def load_database(self, path) -> None:
        """Load a CSV of date,rate lines after a header line."""
        err = self._error_stream()
        lines = _read_lines(path)
        for line in lines[1:]:
            date, sep, price = line.partition(",")
            if not sep:
                print(f"Error: Invalid line format -> {line}", file=err)
                continue
            self._insert(date, parse_value(price, err))

    def find_value(self, date: str) -> float:
        """Return the rate on the date, or on the closest earlier date."""
        index = bisect.bisect_right(self._dates, date)
        if index == 0:
            raise LookupError(f"no exchange rate on or before {date}")
        return self.database[self._dates[index - 1]]

    def process_input(self, path, out: TextIO, err: TextIO) -> None:
        """Value each 'date | amount' line of the input file."""
        try:
            lines = _read_lines(path)
        except OSError:
            print("Error: Could not open file.", file=err)
            return
        if remove_whitespace(lines[0]) != "date|value":
            print("Error: desired format => date | value. ", file=out)
            return
        for raw in lines[1:]:
            line = remove_whitespace(raw)
            date, sep, amount_text = line.partition("|")
            if not sep:
                print(f"Error: bad input => {line}", file=err)
                continue
            amount = parse_value(amount_text, err)
            if not is_valid_date(date):
                print(f"Error: bad input => {date}", file=err)
                continue
            if not check_amount(amount, err):
                continue
            total = _mul_float32(amount, self.find_value(date))
            print(f"{date} => {_format_number(amount)} = {_format_number(total)}", file=out)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("bad input")
        return 0
    exchange = BitcoinExchange(sys.stderr)
    try:
        exchange.load_database(DATABASE_PATH)
    except OSError:
        print("Error: Could not open file.", file=sys.stderr)
        return 1
    try:
        exchange.process_input(args[0], sys.stdout, sys.stderr)
    except LookupError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())