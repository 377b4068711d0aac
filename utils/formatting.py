from __future__ import annotations

from services.advising import CourseDetail, CourseSummary
from utils.course_catalog import LineWarning, LoadResult

DIVIDER = "-" * 40


def format_course_line(course: CourseSummary | CourseDetail) -> str:
    return f"{course.number}, {course.title}"


def format_prerequisites(detail: CourseDetail) -> str:
    # "Prerequisites: CSCI100 (Intro to CS), CS999 (missing)"
    if not detail.has_prerequisites:
        return "Prerequisites: None"
    parts = [f"{p.number} ({p.title})" for p in detail.prerequisites]
    return "Prerequisites: " + ", ".join(parts)


def format_load_summary(result: LoadResult) -> str:
    return f'Loaded {result.count} courses from "{result.locator}".'


def format_warning(warning: LineWarning) -> str:
    return f"Warning: malformed line {warning.line_number} ({warning.reason})."
