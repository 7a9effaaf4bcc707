"""
Spreadsheet model classes.

This module provides the A1 addressing primitives used by the grid engine:
- col_index_to_letters / col_letters_to_index: bijective base-26 column codec
- Address: a single cell (1-based row, 0-based column)
- Range: a normalized rectangular cell region (e.g., A1:C10)
- parse_address / parse_range: lenient parsers returning None on bad input
- cell content helpers distinguishing formulas, literal-equals and blanks

IMPORTANT: rows are 1-based (as written in A1 notation) while columns are
0-indexed (A = 0). This matches how sheet documents address cells.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

from yrxlsim.exceptions import InvalidAddressError, InvalidRangeError


_ADDRESS_RE = re.compile(r"^([A-Z]+)([0-9]+)$")
_LETTERS_RE = re.compile(r"^[A-Z]+$")


def col_index_to_letters(index: int) -> str:
    """Convert a column index (0-indexed) to letter(s) for A1 notation.

    Args:
        index: Column number (0 = A, 25 = Z, 26 = AA, etc.)

    Returns:
        Column letter(s) in A1 notation

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")
    n = index + 1
    letters = ""
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(65 + rem) + letters
    return letters


def col_letters_to_index(letters: str) -> int:
    """Convert column letter(s) to a 0-indexed column number.

    ``$`` lock markers are ignored, so ``$C`` and ``C`` both map to 2.

    Raises:
        InvalidAddressError: If letters is empty or not alphabetic
    """
    cleaned = str(letters).upper().replace("$", "").strip()
    if not _LETTERS_RE.match(cleaned):
        raise InvalidAddressError(f"Invalid column letters: {letters!r}")
    n = 0
    for char in cleaned:
        n = n * 26 + (ord(char) - 64)
    return n - 1


@dataclass(frozen=True)
class Address:
    """A single cell address.

    Attributes:
        row: 1-based row number
        col: 0-based column index
    """
    row: int
    col: int

    @classmethod
    def from_a1(cls, notation: Any) -> "Address":
        """Parse an A1 address such as ``B7`` or ``$B$7`` (case-insensitive).

        Raises:
            InvalidAddressError: If notation is not a single-cell address
        """
        text = str(notation).strip().upper().replace("$", "")
        match = _ADDRESS_RE.match(text)
        if not match or int(match.group(2)) < 1:
            raise InvalidAddressError(f"Invalid cell address: {notation!r}")
        letters, digits = match.groups()
        return cls(row=int(digits), col=col_letters_to_index(letters))

    def to_a1(self) -> str:
        return f"{col_index_to_letters(self.col)}{self.row}"

    def __str__(self) -> str:
        return self.to_a1()


@dataclass(frozen=True)
class Range:
    """A rectangular cell region with normalized corners.

    Attributes:
        r1: Top row (1-based, inclusive)
        r2: Bottom row (1-based, inclusive)
        c1: Left column (0-based, inclusive)
        c2: Right column (0-based, inclusive)
    """
    r1: int
    r2: int
    c1: int
    c2: int

    @classmethod
    def from_corners(cls, first: Address, second: Address) -> "Range":
        """Build a range from two corners given in any order."""
        return cls(
            r1=min(first.row, second.row),
            r2=max(first.row, second.row),
            c1=min(first.col, second.col),
            c2=max(first.col, second.col),
        )

    @classmethod
    def from_a1(cls, notation: Any) -> "Range":
        """Parse ``A1:B2`` range notation; operand order does not matter.

        Raises:
            InvalidRangeError: If notation does not hold exactly two valid addresses
        """
        parts = str(notation).split(":")
        if len(parts) != 2:
            raise InvalidRangeError(f"Invalid range notation: {notation!r}")
        try:
            first = Address.from_a1(parts[0])
            second = Address.from_a1(parts[1])
        except InvalidAddressError as e:
            raise InvalidRangeError(f"Invalid range notation: {notation!r}") from e
        return cls.from_corners(first, second)

    def cells(self):
        """Yield every (row, col) pair in the range, row-major."""
        for row in range(self.r1, self.r2 + 1):
            for col in range(self.c1, self.c2 + 1):
                yield row, col

    def to_a1(self) -> str:
        start = Address(self.r1, self.c1).to_a1()
        if self.r1 == self.r2 and self.c1 == self.c2:
            return start
        return f"{start}:{Address(self.r2, self.c2).to_a1()}"

    def __str__(self) -> str:
        return self.to_a1()


def parse_address(text: Any) -> Optional[Address]:
    """Parse an A1 address, returning None for anything that is not one.

    Range strings such as ``A1:B2`` are not addresses and yield None.
    """
    try:
        return Address.from_a1(text)
    except InvalidAddressError:
        return None


def parse_range(text: Any) -> Optional[Range]:
    """Parse an ``A1:B2`` range, returning None if it is malformed."""
    try:
        return Range.from_a1(text)
    except InvalidRangeError:
        return None


def cell_text(value: Any) -> str:
    """Normalise a parsed document scalar into stored cell content.

    - None → ""
    - bool → "TRUE"/"FALSE"
    - anything else → str(value)
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    return str(value)


def is_literal_equals(content: Any) -> bool:
    """True for ``'=...`` content: an equals-prefixed literal, not a formula."""
    if not isinstance(content, str):
        return False
    s = content.strip()
    return len(s) >= 2 and s[0] == "'" and s[1] == "="


def is_formula(content: Any) -> bool:
    """True if content is a formula (starts with ``=`` and is not literal-equals)."""
    if not content or not isinstance(content, str):
        return False
    return content.strip().startswith("=")


def display_text(content: Any) -> str:
    """Formula-view text of stored content; strips the quote of literal-equals cells."""
    s = "" if content is None else str(content).strip()
    if is_literal_equals(s):
        return s[1:]
    return s
