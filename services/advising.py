from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from services.errors import CatalogNotLoaded, CourseNotFound, EmptyQuery
from utils.course_catalog import Catalog
from utils.course_ids import normalize_course_id

MISSING = "missing"


@dataclass(frozen=True)
class CourseSummary:
    number: str
    title: str


@dataclass(frozen=True)
class ResolvedPrereq:
    # For dangling references title is "missing" and kind is "missing".
    number: str
    title: str
    kind: str = "internal"  # "internal" | "missing"


@dataclass(frozen=True)
class NoPrerequisites:
    """Marker for a course that has no prerequisites at all."""

    def __bool__(self) -> bool:
        return False


NO_PREREQUISITES = NoPrerequisites()

Prerequisites = Union[tuple[ResolvedPrereq, ...], NoPrerequisites]


@dataclass(frozen=True)
class CourseDetail:
    number: str
    title: str
    prerequisites: Prerequisites

    @property
    def has_prerequisites(self) -> bool:
        return self.prerequisites is not NO_PREREQUISITES


def _require_loaded(catalog: Catalog) -> None:
    if not catalog.loaded:
        raise CatalogNotLoaded()


def list_courses(catalog: Catalog) -> Iterator[CourseSummary]:
    """Courses in ascending course-number order.

    Raises CatalogNotLoaded immediately, before anything is iterated.
    """
    _require_loaded(catalog)
    return _iter_summaries(catalog)


def _iter_summaries(catalog: Catalog) -> Iterator[CourseSummary]:
    for number in catalog.sorted_numbers:
        course = catalog.courses[number]
        yield CourseSummary(number=course.number, title=course.title)


def resolve_prereq(catalog: Catalog, number: str) -> ResolvedPrereq:
    found = catalog.courses.get(number)
    if found is None:
        return ResolvedPrereq(number=number, title=MISSING, kind=MISSING)
    return ResolvedPrereq(number=found.number, title=found.title)


def describe_course(catalog: Catalog, query: str) -> CourseDetail:
    """
    Look up one course and resolve its direct prerequisites.

    Raises:
      - CatalogNotLoaded when nothing has been loaded yet
      - EmptyQuery when the query has no usable characters
      - CourseNotFound when the normalized number is not in the catalog
    """
    _require_loaded(catalog)

    number = normalize_course_id(query)
    if not number:
        raise EmptyQuery()

    course = catalog.courses.get(number)
    if course is None:
        raise CourseNotFound(number)

    if not course.prereq_numbers:
        prerequisites: Prerequisites = NO_PREREQUISITES
    else:
        prerequisites = tuple(resolve_prereq(catalog, p) for p in course.prereq_numbers)

    return CourseDetail(number=course.number, title=course.title, prerequisites=prerequisites)
