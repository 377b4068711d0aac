# services/errors.py

from __future__ import annotations


class CatalogError(Exception):
    """Base class for everything the advising core reports to a shell."""


class SourceUnavailable(CatalogError):
    def __init__(self, locator: str, reason: str = ""):
        self.locator = locator
        self.reason = reason
        msg = f'could not open "{locator}"'
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class CatalogNotLoaded(CatalogError):
    def __init__(self):
        super().__init__("catalog has not been loaded")


class EmptyQuery(CatalogError):
    def __init__(self):
        super().__init__("no course entered")


class CourseNotFound(CatalogError):
    def __init__(self, number: str):
        self.number = number
        super().__init__(f"course {number} not found")
