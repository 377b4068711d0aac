from flask import Blueprint

# single blueprint for the catalog and course queries
catalog_bp = Blueprint("catalog", __name__)

from . import courses  # noqa: F401
