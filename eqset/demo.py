"""Walk-through of the equality-predicate set with several element types."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TextIO

from eqset.linked import Set, filter_out


@dataclass(frozen=True)
class Point:
    """A point on the integer plane."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


def format_vector(values: Iterable[int]) -> str:
    """Render a sequence of integers as ``{a b c }``."""
    return "{" + "".join(f"{value} " for value in values) + "}"


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _render(items: Set[Any], fmt: Callable[[Any], str] = str) -> str:
    return "[" + "".join(f" {fmt(item)} " for item in items) + "]"


def _fundamentals(out: TextIO) -> None:
    print("---- Fundamental set operations ----", file=out)
    print(file=out)

    s1: Set[int] = Set()
    s1.add(8)
    s1.add(34)

    s2 = Set(s1)

    s1.add(17)
    s1.add(12)
    s1.add(17)

    s3 = Set(s1)

    print(f"Set s1: {s1}", file=out)
    print(f"Set s2 copied from s1: {s2}", file=out)
    print(f"Set s3 assigned from s1: {s3}", file=out)
    print(f"s1==s2? {_flag(s1 == s2)}", file=out)
    print(f"s1==s3? {_flag(s1 == s3)}", file=out)


def _read_only_ints(numbers: Set[int], out: TextIO) -> None:
    print("---- Read-only set of integers ----", file=out)
    print(f"Set size: {len(numbers)}", file=out)
    print("Printed with iteration:", file=out)
    for value in numbers:
        print(value, file=out)
    if 218 in numbers:
        print("'218' is in the set", file=out)
    else:
        print("'218' is not in the set", file=out)


def _ints(numbers: Set[int], out: TextIO) -> None:
    print("---- Set of integers ----", file=out)
    for value in (24, 42, 2, 46, 12, 6):
        numbers.add(value)

    print(f"Set size: {len(numbers)}", file=out)
    print(f"Set contents: {numbers}", file=out)
    print("Printed with iteration", file=out)
    for value in numbers:
        print(value, file=out)

    target = 12
    print(f"Removing the value {target}", file=out)
    numbers.remove(target)
    print("Element not removed" if target in numbers else "Element removed", file=out)
    print(f"Set after removal: {numbers}", file=out)

    numbers.clear()
    print(f"Set size after clear(): {len(numbers)}", file=out)


def _strings(out: TextIO) -> None:
    print("---- Set of strings ----", file=out)
    words: Set[str] = Set()
    for word in ("acqua", "cioccolata", "fragole", "arance", "pasta"):
        words.add(word)

    print(f"Size of set words={len(words)}", file=out)
    print(f"Printed as text {words}", file=out)
    print(f"Search 'fragole': {_flag(words.find('fragole'))}", file=out)
    print(f"Search 'pane': {_flag(words.find('pane'))}", file=out)
    print(f"Set[1]={words[1]}", file=out)

    print("Remove 'acqua'", file=out)
    words.remove("acqua")

    print("Printed with iteration", file=out)
    for word in words:
        print(word, file=out)

    more = Set(words)
    more.add("gelato")
    print(f"Set more= {more}", file=out)
    print(f"words==more? {_flag(words == more)}", file=out)


def _points(out: TextIO) -> None:
    print("---- Set of points ----", file=out)
    points: Set[Point] = Set()
    coordinates = ((0, 4), (1, 4), (6, 2), (3, 2), (4, 7))
    listed = ", ".join(str(Point(x, y)) for x, y in coordinates)
    print(f"Adding {listed} to the set points", file=out)
    for x, y in coordinates:
        points.add(Point(x, y))

    print(f"Size of set points: {len(points)}", file=out)
    print(f"Printed as text {points}", file=out)
    print(f"points[4]={points[4]}", file=out)

    print("Creating set copy by assignment from points.", file=out)
    copy = Set(points)
    print("Printing copy with iteration", file=out)
    for point in copy:
        print(point, file=out)

    removed = Point(6, 2)
    print(f"Removing {removed} from copy.", file=out)
    copy.remove(removed)
    print(f"Search copy for {removed}: {_flag(copy.find(removed))}", file=out)
    print(f"points==copy? {_flag(points == copy)}", file=out)


def _filtering(out: TextIO) -> None:
    print("---- filter_out ----", file=out)
    numbers: Set[int] = Set([3, 2, 5, 7, 9, 8])
    print(f"Printed as text {numbers}", file=out)
    print("Calling filter_out with an evenness test", file=out)
    result = filter_out(numbers, lambda value: value % 2 == 0)
    print(f"Result: {result}", file=out)


def _vectors(out: TextIO) -> None:
    print("---- Set of integer vectors ----", file=out)
    v1 = [2, 6, 9]
    v2 = [32, 4, 52]
    v3 = [5, 3, 1, 8, 4]

    vectors: Set[list[int]] = Set()
    for vector in (v1, v2, v3):
        vectors.add(vector)

    others: Set[list[int]] = Set()
    others.add(v1)
    others.add(v3)

    print(f"Size of set vectors: {len(vectors)}", file=out)
    print(f"Size of set others: {len(others)}", file=out)
    print(f"Printed as text {_render(vectors, format_vector)}", file=out)
    print("Printing others with iteration.", file=out)
    for vector in others:
        print(format_vector(vector), file=out)

    print(f"vectors[2]={format_vector(vectors[2])}", file=out)

    missing = [2, 3, 4, 5]
    print(f"Search {format_vector(missing)} in vectors= {_flag(vectors.find(missing))}", file=out)
    print(f"Search {format_vector(v2)} in vectors= {_flag(vectors.find(v2))}", file=out)
    print(f"vectors==others? {_flag(vectors == others)}", file=out)

    print(f"Removing {format_vector(v2)}.", file=out)
    vectors.remove(v2)
    print(f"Size of set vectors: {len(vectors)}", file=out)
    print(f"vectors==others? {_flag(vectors == others)}", file=out)

    print("Removing every element from set vectors.", file=out)
    vectors.clear()
    print(f"Size of set vectors: {len(vectors)}", file=out)


def _union_and_common(out: TextIO) -> None:
    print("---- Union (+) and common elements (-) ----", file=out)
    first: Set[str] = Set()
    for word in ("lasagne", "pesto", "takoyaki", "insalata", "gamberi"):
        first.add(word)

    second: Set[str] = Set()
    for word in ("lasagne", "pesto", "takoyaki", "ricotta", "sofficini", "torta", "pizza"):
        second.add(word)

    print(f"Set 1: {first}", file=out)
    print(f"Set 2: {second}", file=out)
    print("Union with +", file=out)
    print(f"Result: {first + second}", file=out)
    print("Common elements with -", file=out)
    print(f"Result: {first - second}", file=out)


def main(argv: list[str] | None = None) -> int:
    """Run every demonstration in turn and print the results."""
    parser = argparse.ArgumentParser(
        prog="eqset-demo",
        description="Exercise the equality-predicate set with several element types.",
    )
    parser.parse_args(argv)
    out = sys.stdout

    _fundamentals(out)
    print(file=out)

    numbers: Set[int] = Set()
    _read_only_ints(numbers, out)
    print(file=out)

    _ints(numbers, out)
    print(file=out)

    _strings(out)
    print(file=out)

    _points(out)
    print(file=out)

    _filtering(out)
    print(file=out)

    _vectors(out)
    print(file=out)

    _union_and_common(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())