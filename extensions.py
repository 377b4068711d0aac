from __future__ import annotations

import threading

from services.errors import SourceUnavailable
from utils.course_catalog import Catalog, LoadResult, load_catalog


class CatalogStore:
    """Holds the one Catalog a process serves queries from.

    Flask handles requests on several threads, so the reference swap and
    snapshot reads go through a lock. Readers get an immutable Catalog and
    never see a half-built one.
    """

    def __init__(self, app=None):
        self._catalog = Catalog.empty()
        self._lock = threading.Lock()
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        app.extensions["catalog_store"] = self

        path = app.config.get("CATALOG_PATH")
        if not path or not app.config.get("CATALOG_AUTOLOAD", False):
            return

        try:
            result = self.load(str(path))
        except SourceUnavailable as e:
            app.logger.warning("Catalog not loaded at startup: %s", e)
            return
        app.logger.info("Loaded %d courses from %s", result.count, result.locator)

    @property
    def catalog(self) -> Catalog:
        return self.snapshot()

    def snapshot(self) -> Catalog:
        with self._lock:
            return self._catalog

    def load(self, locator: str) -> LoadResult:
        # Build outside the lock; only the swap needs it.
        result = load_catalog(locator)
        with self._lock:
            self._catalog = result.catalog
        return result
