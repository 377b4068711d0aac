from pathlib import Path

from flask import abort, current_app, jsonify, request

from . import catalog_bp
from services.advising import describe_course, list_courses
from services.errors import CatalogNotLoaded, CourseNotFound, EmptyQuery, SourceUnavailable


def _store():
    return current_app.extensions["catalog_store"]


def _resolve_catalog_file(filename: str) -> Path:
    # Only files inside CATALOG_DIR may be loaded over HTTP.
    base = Path(current_app.config["CATALOG_DIR"]).resolve()
    try:
        target = (base / filename).resolve()
    except (OSError, ValueError):
        abort(400, description="Invalid catalog file name.")
    if not target.is_relative_to(base):
        abort(400, description="Catalog file must be inside the catalog folder.")
    return target


@catalog_bp.route("/courses")
def course_list():
    try:
        courses = [{"number": c.number, "title": c.title} for c in list_courses(_store().catalog)]
    except CatalogNotLoaded as e:
        abort(409, description=str(e))

    return jsonify({"count": len(courses), "courses": courses})


@catalog_bp.route("/courses/describe")
def course_detail():
    query = request.args.get("number", "")

    try:
        detail = describe_course(_store().catalog, query)
    except CatalogNotLoaded as e:
        abort(409, description=str(e))
    except EmptyQuery as e:
        abort(400, description=str(e))
    except CourseNotFound as e:
        abort(404, description=str(e))

    prerequisites = None
    if detail.has_prerequisites:
        prerequisites = [
            {"number": p.number, "title": p.title, "kind": p.kind}
            for p in detail.prerequisites
        ]

    return jsonify(
        {
            "number": detail.number,
            "title": detail.title,
            "has_prerequisites": detail.has_prerequisites,
            "prerequisites": prerequisites,
        }
    )


@catalog_bp.route("/catalog/load", methods=["POST"])
def load_catalog_file():
    data = request.get_json(silent=True) or {}
    filename = str(data.get("filename") or "").strip()
    if not filename:
        abort(400, description="No file name entered.")

    target = _resolve_catalog_file(filename)

    try:
        result = _store().load(str(target))
    except SourceUnavailable as e:
        # previous catalog stays in place
        current_app.logger.warning("Catalog reload failed: %s", e)
        abort(404, description=f'Could not open "{filename}".')

    return jsonify(
        {
            "count": result.count,
            "filename": filename,
            "warnings": [
                {"line": w.line_number, "reason": w.reason, "text": w.text}
                for w in result.warnings
            ],
        }
    )
