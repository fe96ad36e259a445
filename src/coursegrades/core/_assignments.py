"""Graded assignments and collections of them."""

from collections.abc import Sequence, Mapping
import dataclasses
import typing
from typing import Optional, Union


META_KINDS = ("missing", "noCount", "absent")

#: the value of an earned or possible points field, before coercion
PointsValue = Union[str, float, int, None]


@dataclasses.dataclass(frozen=True)
class AssignmentMeta:
    """A flag attached to an assignment by the grade portal.

    Attributes
    ----------
    kind : str
        One of ``"missing"``, ``"noCount"`` or ``"absent"``. Only
        ``"noCount"`` affects grade computations: such an assignment is left
        out entirely.
    note : str
        Free-form text shown alongside the flag.

    """

    kind: str
    note: str = ""

    def __post_init__(self):
        if self.kind not in META_KINDS:
            raise ValueError(
                f'Unknown assignment meta kind "{self.kind}". Must be one of {META_KINDS}.'
            )


@dataclasses.dataclass(frozen=True)
class Assignment:
    """A single graded unit of work.

    Only ``category``, ``points_earned``, ``points_possible`` and ``meta``
    are used by the computations; the rest is carried along untouched.

    Attributes
    ----------
    name : str
        The assignment's name.
    category : str
        The grading category, used as a key into a category weight mapping.
        Any string is accepted.
    points_earned : str, float, int or None
        The grade achieved. May be text, which is parsed when grades are
        computed.
    points_possible : str, float, int or None
        The maximum number of points. Expected to be positive, but this is not
        enforced.
    course : str
        The course the assignment belongs to.
    term : str
        The term label, e.g., ``"Q1"``.
    due_date : str
        The due date as given by the grade portal.
    artificial : bool
        Whether this is a hypothetical ("what-if") assignment entered by the
        student rather than one from the grade portal.
    meta : tuple[AssignmentMeta, ...]
        Flags attached by the grade portal.

    """

    name: str
    category: str
    points_earned: PointsValue
    points_possible: PointsValue
    course: str = ""
    term: str = ""
    due_date: str = ""
    artificial: bool = False
    meta: typing.Tuple[AssignmentMeta, ...] = ()

    @classmethod
    def from_dict(cls, record: Mapping) -> "Assignment":
        """Create an assignment from a record as produced by the grade portal.

        The record uses the portal's keys: ``className``, ``name``, ``term``,
        ``category``, ``grade``, ``outOf``, ``dueDate``, ``artificial`` and
        ``meta``, where ``meta`` is a list of mappings with ``type`` and
        ``note`` keys. Missing descriptive keys default to empty values.

        """
        meta = tuple(
            AssignmentMeta(m["type"], m.get("note", "")) for m in record.get("meta") or ()
        )
        return cls(
            name=record.get("name", ""),
            category=record["category"],
            points_earned=record.get("grade"),
            points_possible=record.get("outOf"),
            course=record.get("className", ""),
            term=record.get("term", ""),
            due_date=record.get("dueDate", ""),
            artificial=bool(record.get("artificial", False)),
            meta=meta,
        )

    @property
    def counts(self) -> bool:
        """Whether the assignment counts towards grades (i.e., is not "noCount")."""
        return not any(m.kind == "noCount" for m in self.meta)


class Assignments(Sequence):
    """A sequence of assignments.

    Behaves like a read-only list of :class:`Assignment` objects, but has some
    additional methods which make it easy to select groups of assignments.

    """

    def __init__(self, assignments: typing.Iterable[Assignment]):
        self._assignments = list(assignments)

    def __contains__(self, element):
        return element in self._assignments

    def __len__(self):
        return len(self._assignments)

    def __iter__(self):
        return iter(self._assignments)

    def __eq__(self, other):
        return list(self) == list(other)

    def __add__(self, other):
        """Concatenates :class:`Assignments`."""
        return Assignments(self._assignments + list(other))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._assignments[index])
        return self._assignments[index]

    def __repr__(self):
        return f"Assignments(names={[a.name for a in self._assignments]})"

    @property
    def names(self) -> list[str]:
        """The names of the assignments, in order."""
        return [a.name for a in self._assignments]

    @property
    def categories(self) -> list[str]:
        """The distinct categories, in the order they are first seen."""
        return list(dict.fromkeys(a.category for a in self._assignments))

    def in_category(self, category: str) -> "Assignments":
        """Return only those assignments in the given category."""
        return self.__class__(a for a in self._assignments if a.category == category)

    def in_term(self, term: str) -> "Assignments":
        """Return only those assignments in the given term."""
        return self.__class__(a for a in self._assignments if a.term == term)

    def for_course(self, course: str) -> "Assignments":
        """Return only those assignments belonging to the given course."""
        return self.__class__(a for a in self._assignments if a.course == course)

    def countable(self) -> "Assignments":
        """Return only those assignments which count towards grades.

        Assignments flagged as "noCount" by the grade portal are removed.

        """
        return self.__class__(a for a in self._assignments if a.counts)

    def find(self, name: str) -> Optional[Assignment]:
        """Return the first assignment with the given name, or ``None``."""
        for assignment in self._assignments:
            if assignment.name == name:
                return assignment
        return None
