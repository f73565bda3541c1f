"""Character, word, sentence and paragraph counts for plain-text files."""

from __future__ import annotations

import argparse
import codecs
import os
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

_ANY_CHAR = re.compile(".")
_NON_SPACE = re.compile(r"\S")
_WORD_END = re.compile(r"[^\s][\s]")
_SENTENCE_END = re.compile(r"[^\.?!][\.?!]")

_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

_TABLE_LABELS = (
    "Characters",
    "Characters without space",
    "Words",
    "Sentences",
    "Paragraphs",
)


@dataclass(frozen=True)
class TextStats:
    """Counts gathered from the lines of a text."""

    chars: int = 0
    chars_without_spaces: int = 0
    words: int = 0
    sentences: int = 0
    paragraphs: int = 0

    def _values(self) -> tuple[int, int, int, int, int]:
        return (
            self.chars,
            self.chars_without_spaces,
            self.words,
            self.sentences,
            self.paragraphs,
        )

    def to_csv(self) -> str:
        """Render the counts as semicolon-separated ``label;value`` lines."""
        rows = (
            ("Chars", self.chars),
            ("Chars without spaces", self.chars_without_spaces),
            ("Words", self.words),
            ("Sentences", self.sentences),
            ("Paragraphs", self.paragraphs),
        )
        return "".join(f"{label};{value}\n" for label, value in rows)


def _matches(pattern: re.Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def count_lines(lines: Iterable[str]) -> TextStats:
    """Count characters, words, sentences and paragraphs over ``lines``.

    Every line is a paragraph. Words are counted as the number of
    non-space characters followed by a space, plus one for the last word
    of the line, so an empty line still counts as one word.
    """
    chars = chars_without_spaces = words = sentences = paragraphs = 0
    for line in lines:
        chars += _matches(_ANY_CHAR, line)
        chars_without_spaces += _matches(_NON_SPACE, line)
        words += _matches(_WORD_END, line) + 1
        sentences += _matches(_SENTENCE_END, line)
        paragraphs += 1
    return TextStats(chars, chars_without_spaces, words, sentences, paragraphs)


def _decode(data: bytes) -> str:
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return data.decode(encoding, errors="replace")
    return data.decode("utf-8", errors="replace")


def _split_lines(text: str) -> Iterator[str]:
    pieces = text.replace("\r\n", "\n").split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    yield from pieces


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a text file into lines without their terminators.

    A byte-order mark selects UTF-8, UTF-16 or UTF-32; otherwise UTF-8 is
    assumed.
    """
    data = Path(path).read_bytes()
    return list(_split_lines(_decode(data)))


def csv_path(path: str | os.PathLike[str]) -> str:
    """Return the export path: every ``txt`` in ``path`` becomes ``csv``."""
    return os.fspath(path).replace("txt", "csv")


def export_csv(stats: TextStats, path: str | os.PathLike[str]) -> Path:
    """Write ``stats`` as CSV to ``path`` and return the path written."""
    target = Path(path)
    with target.open("w", encoding="utf-8", newline="") as handle:
        handle.write(stats.to_csv())
    return target


def main(argv: list[str] | None = None) -> int:
    """Count a text file, print the table and optionally export it as CSV."""
    parser = argparse.ArgumentParser(
        prog="textstats",
        description="Count characters, words, sentences and paragraphs in a text file.",
    )
    parser.add_argument("file", help="text file to analyse")
    parser.add_argument(
        "--export",
        action="store_true",
        help="write the counts next to the file, with 'txt' replaced by 'csv'",
    )
    args = parser.parse_args(argv)

    if ".txt" not in args.file:
        print("Please select a .txt file.", file=sys.stderr)

    try:
        lines = read_lines(args.file)
    except OSError as error:
        print(f"Cannot read {args.file}: {error.strerror or error}", file=sys.stderr)
        return 1

    stats = count_lines(lines)
    width = max(len(label) for label in _TABLE_LABELS)
    for label, value in zip(_TABLE_LABELS, stats._values()):
        print(f"{label:<{width}}  {value}")

    if args.export:
        target = csv_path(args.file)
        try:
            export_csv(stats, target)
        except OSError as error:
            print(f"Cannot write {target}: {error.strerror or error}", file=sys.stderr)
            return 1
        print(f"Exported to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())