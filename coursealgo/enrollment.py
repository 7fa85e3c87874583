"""Query-driven front end for the course registry.

Input is a whitespace-separated token stream: a query count followed by
that many queries of the forms

* ``I sid subject sname semester phone timestamp``: register an application
* ``L sid``: list a student's subjects
* ``C subject``: count a subject's applicants and sum their node depths
* ``M subject k``: the ``k`` earliest applicants for a subject

Each query produces one output line.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, List, Optional, Sequence

from coursealgo.registry import CourseRegistry

NO_RECORDS_MESSAGE = "No records found"
UNEXPECTED_ERROR_MESSAGE = "Algorithm error! You must solve this problem."


class _TokenStream:
    """Pulls typed fields off a token iterator."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens = iter(tokens)

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def _pairs_line(pairs: Iterable[tuple]) -> str:
    return "".join(f"{first} {color.value} " for first, color in pairs)


def run_queries(tokens: Iterable[str]) -> Iterator[str]:
    """Run the queries in ``tokens`` and yield one output line per query.

    Unknown query letters are skipped. Running out of tokens or a
    malformed number raises ``ValueError``.
    """
    stream = _TokenStream(tokens)
    registry = CourseRegistry()

    for _ in range(stream.number()):
        query = stream.word()
        if query == "I":
            sid = stream.number()
            subject = stream.word()
            sname = stream.word()
            semester = stream.number()
            phone = stream.word()
            timestamp = stream.number()
            depth, duplicate = registry.register(
                sid, subject, sname, semester, phone, timestamp
            )
            yield f"{depth} {int(duplicate)}"
        elif query == "L":
            subjects = registry.subjects_of(stream.number())
            yield _pairs_line(subjects) if subjects else NO_RECORDS_MESSAGE
        elif query == "C":
            subject = stream.word()
            try:
                count, depth_sum = registry.count_subject(subject)
            except KeyError:
                yield UNEXPECTED_ERROR_MESSAGE
            else:
                yield f"{count} {depth_sum}"
        elif query == "M":
            subject = stream.word()
            k = stream.number()
            try:
                applicants = registry.earliest_applicants(subject, k)
            except KeyError:
                yield UNEXPECTED_ERROR_MESSAGE
            else:
                yield _pairs_line(applicants)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read queries from standard input and print the answers."""
    parser = argparse.ArgumentParser(
        description="Answer course registration queries read from standard input."
    )
    parser.parse_args(argv)

    lines: List[str] = list(run_queries(sys.stdin.read().split()))
    for line in lines:
        sys.stdout.write(line + "\n")
    return 0