import pytest

from app import create_app
from config import TestConfig

SAMPLE_LINES = [
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
    "CSCI350,Operating Systems,CSCI300",
    "CSCI101,Introduction to Programming in C,CSCI100",
    "CSCI100,Introduction to Computer Science",
    "CSCI200,\"Data Structures, with Labs\",CSCI101",
    "CS300,Capstone,CS999",
]


@pytest.fixture
def write_catalog(tmp_path):
    """Write lines to a catalog file under tmp_path and return its path as a string."""

    def _write(lines, name="courses.csv"):
        p = tmp_path / name
        p.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(p)

    return _write


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_path(write_catalog):
    return write_catalog(SAMPLE_LINES)


@pytest.fixture
def app(tmp_path):
    app = create_app(TestConfig)
    app.config["CATALOG_DIR"] = str(tmp_path)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["catalog_store"]
