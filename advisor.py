"""Interactive advising menu.

  1. Load Data Structure
  2. Print Course List
  3. Print Course
  9. Exit

Run with `python advisor.py [--file courses.csv]` or `flask advise`.
"""

from __future__ import annotations

import re
from typing import Callable

import click
from flask import current_app, has_app_context

from extensions import CatalogStore
from services.advising import describe_course, list_courses
from services.errors import CatalogNotLoaded, CourseNotFound, EmptyQuery, SourceUnavailable
from utils.formatting import (
    DIVIDER,
    format_course_line,
    format_load_summary,
    format_prerequisites,
    format_warning,
)

MENU = (
    "1. Load Data Structure",
    "2. Print Course List",
    "3. Print Course",
    "9. Exit",
)

NOT_LOADED_MSG = "Please load the data first (Option 1)."

_CHOICE_RE = re.compile(r"\s*([+-]?\d+)")


def _parse_choice(raw: str) -> int:
    # leading integer, like "1x" -> 1; anything else is not a choice
    m = _CHOICE_RE.match(raw)
    return int(m.group(1)) if m else -1


def _load(store: CatalogStore, filename: str, write: Callable[[str], None]) -> bool:
    try:
        result = store.load(filename)
    except SourceUnavailable:
        write(f'Error: could not open "{filename}".')
        return False

    for w in result.warnings:
        write(format_warning(w))
    write(format_load_summary(result))
    return True


def _print_course_list(store: CatalogStore, write: Callable[[str], None]) -> None:
    try:
        courses = list_courses(store.catalog)
    except CatalogNotLoaded:
        write(NOT_LOADED_MSG)
        return

    for c in courses:
        write(format_course_line(c))


def _print_course(store: CatalogStore, read: Callable[[str], str], write: Callable[[str], None]) -> None:
    catalog = store.catalog
    if not catalog.loaded:
        write(NOT_LOADED_MSG)
        return

    query = read("What course do you want to know about? ")
    try:
        detail = describe_course(catalog, query)
    except EmptyQuery:
        write("No course entered.")
        return
    except CourseNotFound:
        write("Course not found.")
        return

    write(format_course_line(detail))
    write(format_prerequisites(detail))


def run_menu(
    store: CatalogStore,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    write("Welcome to the course planner.")

    while True:
        write(DIVIDER)
        for line in MENU:
            write(line)
        write(DIVIDER)

        try:
            raw = read("Enter choice: ")
        except EOFError:
            return

        choice = _parse_choice(raw)

        try:
            if choice == 1:
                filename = read("Enter the file name: ").strip()
                if filename:
                    _load(store, filename, write)
                else:
                    write("No file name entered.")
            elif choice == 2:
                _print_course_list(store, write)
            elif choice == 3:
                _print_course(store, read, write)
            elif choice == 9:
                write("Thank you for using the Advising Assistance Program.")
                return
            else:
                write("That is not a valid option. Try again.")
        except EOFError:
            return


def _current_store() -> CatalogStore:
    if has_app_context():
        return current_app.extensions["catalog_store"]
    return CatalogStore()


@click.command("advise")
@click.option("--file", "filename", default=None, help="Catalog file to load before the menu starts.")
def advise(filename: str | None) -> None:
    """Run the interactive advising menu."""
    store = _current_store()
    if filename:
        _load(store, filename, click.echo)
    run_menu(store, read=input, write=click.echo)


if __name__ == "__main__":
    advise()
