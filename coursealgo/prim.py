"""Prim's spanning tree over city roads, prioritised by construction date.

Input is a whitespace-separated token stream:

* a city count, then that many ``city elevation`` pairs
* a road count, then that many ``first second length timestamp`` entries
* the starting city

A road's priority is its timestamp, then its length, then the elevation
difference of its ends, then its two city names in dictionary order.
The smallest priority is taken first.
"""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

Road = Tuple[str, str, int, str]


@dataclass(frozen=True)
class Bridge:
    """A road between two cities, with its cities stored in dictionary order."""

    earlier_city: str
    later_city: str
    length: int
    timestamp: str
    height_difference: int

    def priority(self) -> Tuple[str, int, int, str, str]:
        """Sort key: the smallest value is maintained first."""
        return (
            self.timestamp,
            self.length,
            self.height_difference,
            self.earlier_city,
            self.later_city,
        )


@dataclass
class SpanningTree:
    """Bridges chosen by Prim's algorithm, in the order they were chosen."""

    bridges: List[Bridge] = field(default_factory=list)

    @property
    def total_length(self) -> int:
        return sum(bridge.length for bridge in self.bridges)

    @property
    def sorted_bridges(self) -> List[Bridge]:
        """Bridges ordered by their city names."""
        return sorted(self.bridges, key=lambda b: (b.earlier_city, b.later_city))


def make_bridge(
    first_city: str,
    second_city: str,
    length: int,
    timestamp: str,
    elevations: Mapping[str, int],
) -> Bridge:
    """Build a bridge; both cities must have a known elevation."""
    earlier, later = sorted((first_city, second_city))
    missing = [city for city in (earlier, later) if city not in elevations]
    if missing:
        raise ValueError(f"no elevation known for city {missing[0]!r}")
    difference = abs(elevations[earlier] - elevations[later])
    return Bridge(earlier, later, length, timestamp, difference)


def build_spanning_tree(
    elevations: Mapping[str, int], roads: Iterable[Road], start: str
) -> SpanningTree:
    """Run Prim's algorithm from ``start`` over the given roads."""
    graph: Dict[str, List[Bridge]] = {}
    for first, second, length, timestamp in roads:
        bridge = make_bridge(first, second, length, timestamp, elevations)
        graph.setdefault(first, []).append(bridge)
        graph.setdefault(second, []).append(bridge)

    if start not in graph:
        raise ValueError(f"starting city {start!r} has no roads")

    counter = itertools.count()
    heap: List[Tuple[Tuple[str, int, int, str, str], int, Bridge]] = []

    def push(bridge: Bridge) -> None:
        heapq.heappush(heap, (bridge.priority(), next(counter), bridge))

    in_tree = {start}
    for bridge in graph[start]:
        push(bridge)

    tree = SpanningTree()
    while heap:
        _, _, bridge = heapq.heappop(heap)
        first, second = bridge.earlier_city, bridge.later_city
        if first in in_tree and second in in_tree:
            continue
        new_city = second if first in in_tree else first
        in_tree.add(new_city)

        for connected in graph[new_city]:
            other = (
                connected.later_city
                if connected.earlier_city == new_city
                else connected.earlier_city
            )
            if other not in in_tree:
                push(connected)
        tree.bridges.append(bridge)
    return tree


def _tokens_reader(tokens: Iterator[str]):
    def word() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number() -> int:
        token = word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    return word, number


def parse_input(text: str) -> Tuple[Dict[str, int], List[Road], str]:
    """Parse the problem input into elevations, roads and the starting city.

    A city listed twice keeps its first elevation.
    """
    word, number = _tokens_reader(iter(text.split()))

    elevations: Dict[str, int] = {}
    for _ in range(number()):
        city = word()
        elevations.setdefault(city, number())

    roads: List[Road] = []
    for _ in range(number()):
        first = word()
        second = word()
        length = number()
        timestamp = word()
        roads.append((first, second, length, timestamp))

    return elevations, roads, word()


def format_report(tree: SpanningTree) -> List[str]:
    """Output lines: each chosen pair, the total length, then every bridge."""
    lines = [f"{b.earlier_city} {b.later_city}" for b in tree.bridges]
    lines.append(str(tree.total_length))
    lines.extend(
        f"{b.timestamp} {b.earlier_city} {b.later_city} {b.length}"
        for b in tree.sorted_bridges
    )
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the road network from standard input and print the report."""
    parser = argparse.ArgumentParser(
        description="Choose roads to maintain with Prim's algorithm."
    )
    parser.parse_args(argv)

    elevations, roads, start = parse_input(sys.stdin.read())
    tree = build_spanning_tree(elevations, roads, start)
    for line in format_report(tree):
        sys.stdout.write(line + "\n")
    return 0