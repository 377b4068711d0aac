def _load(client, filename="courses.csv"):
    return client.post("/catalog/load", json={"filename": filename})


def test_courses_before_load_is_conflict(client):
    assert client.get("/courses").status_code == 409
    assert client.get("/courses/describe?number=CSCI100").status_code == 409


def test_load_and_list(client, write_catalog, sample_lines):
    write_catalog(sample_lines + ["broken line"])

    resp = _load(client)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["count"] == 7
    assert body["warnings"] == [{"line": 8, "reason": "expected a course number and title", "text": "broken line"}]

    listing = client.get("/courses").get_json()
    numbers = [c["number"] for c in listing["courses"]]
    assert listing["count"] == 7
    assert numbers == sorted(numbers)


def test_describe(client, write_catalog, sample_lines):
    write_catalog(sample_lines)
    _load(client)

    body = client.get("/courses/describe?number=csci-300").get_json()
    assert body["number"] == "CSCI300"
    assert body["has_prerequisites"] is True
    assert [p["number"] for p in body["prerequisites"]] == ["CSCI200", "MATH201"]

    body = client.get("/courses/describe?number=CS300").get_json()
    assert body["prerequisites"] == [{"number": "CS999", "title": "missing", "kind": "missing"}]

    body = client.get("/courses/describe?number=MATH201").get_json()
    assert body["has_prerequisites"] is False
    assert body["prerequisites"] is None


def test_describe_errors(client, write_catalog, sample_lines):
    write_catalog(sample_lines)
    _load(client)

    assert client.get("/courses/describe").status_code == 400
    assert client.get("/courses/describe?number=%20%20").status_code == 400
    assert client.get("/courses/describe?number=ZZ000").status_code == 404


def test_load_requires_filename(client):
    assert client.post("/catalog/load", json={}).status_code == 400
    assert client.post("/catalog/load", data="not json").status_code == 400


def test_load_rejects_paths_outside_catalog_dir(client):
    assert _load(client, "../../etc/passwd").status_code == 400


def test_failed_reload_keeps_catalog(client, write_catalog, sample_lines, store):
    write_catalog(sample_lines)
    _load(client)
    before = store.snapshot()

    resp = _load(client, "missing.csv")

    assert resp.status_code == 404
    assert store.snapshot() is before
    assert client.get("/courses").get_json()["count"] == 7


def test_load_rejects_name_with_null_byte(client, write_catalog, sample_lines, store):
    write_catalog(sample_lines)
    _load(client)
    before = store.snapshot()

    resp = _load(client, "bad\x00name.csv")

    assert resp.status_code in (400, 404)
    assert store.snapshot() is before
