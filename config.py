import os

# Absolute path to project root
# (a stable anchor for all file paths)
basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    # Course catalog files live here. POST /catalog/load only reads from this folder.
    CATALOG_DIR = os.path.join(basedir, "data_catalog")

    # Loaded once when the app starts (if it exists).
    CATALOG_PATH = os.path.join(CATALOG_DIR, "courses.csv")
    CATALOG_AUTOLOAD = True


class TestConfig(Config):
    TESTING = True
    CATALOG_AUTOLOAD = False
