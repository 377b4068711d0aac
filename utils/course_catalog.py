from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Union
import logging

from services.errors import SourceUnavailable
from utils.course_ids import normalize_course_id
from utils.records import parse_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Course:
    # number is always the normalized key this course is stored under
    number: str
    title: str
    prereq_numbers: tuple[str, ...] = ()


@dataclass(frozen=True)
class Catalog:
    """Loaded courses plus the key order used for listings.

    A Catalog is never mutated; a reload produces a new one.
    """

    courses: Mapping[str, Course] = field(default_factory=lambda: MappingProxyType({}))
    sorted_numbers: tuple[str, ...] = ()
    loaded: bool = False

    @classmethod
    def empty(cls) -> "Catalog":
        return cls()

    def __len__(self) -> int:
        return len(self.courses)


@dataclass(frozen=True)
class ParsedRecord:
    line_number: int
    course: Course


@dataclass(frozen=True)
class LineWarning:
    line_number: int
    reason: str
    text: str = ""


LineResult = Union[ParsedRecord, LineWarning]


@dataclass(frozen=True)
class BuildResult:
    catalog: Catalog
    warnings: tuple[LineWarning, ...] = ()


@dataclass(frozen=True)
class LoadResult:
    catalog: Catalog
    locator: str
    warnings: tuple[LineWarning, ...] = ()

    @property
    def count(self) -> int:
        return len(self.catalog.courses)


def iter_records(lines: Iterable[str]) -> Iterator[LineResult]:
    """Yield one tagged result per non-blank line.

    Line numbers are 1-based and count blank lines too, so warnings point at
    the right place in the file.
    """
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            continue

        fields = parse_line(line)
        if len(fields) < 2:
            yield LineWarning(line_number, "expected a course number and title", line)
            continue

        number = normalize_course_id(fields[0])
        if not number:
            yield LineWarning(line_number, "missing course number", line)
            continue

        prereqs = []
        for raw_prereq in fields[2:]:
            p = normalize_course_id(raw_prereq)
            if p:
                prereqs.append(p)

        yield ParsedRecord(
            line_number,
            Course(number=number, title=fields[1], prereq_numbers=tuple(prereqs)),
        )


def build_catalog(lines: Iterable[str]) -> BuildResult:
    """Fold catalog lines into a new, loaded Catalog.

    Malformed lines become warnings and are skipped. When a course number
    appears more than once the last occurrence wins.
    """
    table: dict[str, Course] = {}
    warnings: list[LineWarning] = []

    for result in iter_records(lines):
        if isinstance(result, LineWarning):
            warnings.append(result)
            continue

        course = result.course
        if course.number in table:
            logger.debug(
                "line %d: %s replaces an earlier entry", result.line_number, course.number
            )
        table[course.number] = course

    catalog = Catalog(
        courses=MappingProxyType(table),
        sorted_numbers=tuple(sorted(table)),
        loaded=True,
    )
    return BuildResult(catalog=catalog, warnings=tuple(warnings))


def read_source(locator: str) -> list[str]:
    """Read every line of a catalog file.

    The whole file is read up front so a failure part way through can never
    leave a half-built catalog behind. An empty file is fine (no lines).
    """
    p = Path(locator)
    try:
        # utf-8-sig drops the byte-order mark spreadsheet exports add
        with p.open(encoding="utf-8-sig") as fh:
            return fh.readlines()
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise SourceUnavailable(locator, str(e)) from e


def load_catalog(locator: str) -> LoadResult:
    lines = read_source(locator)
    built = build_catalog(lines)

    for w in built.warnings:
        logger.info("[catalog] %s line %d: %s", locator, w.line_number, w.reason)
    logger.info("[catalog] Loaded %d courses from %s", len(built.catalog), locator)

    return LoadResult(catalog=built.catalog, locator=locator, warnings=built.warnings)
