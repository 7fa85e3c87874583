"""Course registrations kept in a red-black tree keyed by (student id, subject)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from coursealgo.rbnode import Color, Node, node_depth
from coursealgo.rbtree import RedBlackTree


@dataclass
class Enrollment:
    """One student's application for one subject."""

    sid: int
    subject: str
    sname: str
    semester: int
    phone: str
    timestamp: int


class CourseRegistry:
    """Registrations indexed by student and by subject."""

    def __init__(self) -> None:
        self.tree = RedBlackTree()
        self._by_sid: Dict[int, List[Node]] = {}
        self._by_subject: Dict[str, List[Node]] = {}

    def register(
        self,
        sid: int,
        subject: str,
        sname: str,
        semester: int,
        phone: str,
        timestamp: int,
    ) -> Tuple[int, bool]:
        """Record an application.

        Returns the depth of the node holding it and whether the
        (sid, subject) pair was already registered. A repeat application
        only updates the timestamp.
        """
        enrollment = Enrollment(sid, subject, sname, semester, phone, timestamp)
        node, duplicate = self.tree.insert((sid, subject), enrollment)
        if duplicate:
            node.payload.timestamp = timestamp
        else:
            self._by_sid.setdefault(sid, []).append(node)
            self._by_subject.setdefault(subject, []).append(node)
        return node_depth(node), duplicate

    def subjects_of(self, sid: int) -> List[Tuple[str, Color]]:
        """Subjects of a student in dictionary order, with their node colours.

        An unknown student yields an empty list.
        """
        nodes = self._by_sid.get(sid, [])
        nodes.sort(key=lambda node: node.key[1])
        return [(node.key[1], node.color) for node in nodes]

    def count_subject(self, subject: str) -> Tuple[int, int]:
        """Number of applicants for a subject and the sum of their node depths."""
        try:
            nodes = self._by_subject[subject]
        except KeyError:
            raise KeyError(f"no applications for subject {subject!r}") from None
        return len(nodes), sum(node_depth(node) for node in nodes)

    def earliest_applicants(self, subject: str, k: int) -> List[Tuple[int, Color]]:
        """Up to ``k`` student ids of the earliest applicants, with node colours."""
        try:
            nodes = self._by_subject[subject]
        except KeyError:
            raise KeyError(f"no applications for subject {subject!r}") from None
        nodes.sort(key=lambda node: node.payload.timestamp)
        return [(node.key[0], node.color) for node in nodes[: max(k, 0)]]