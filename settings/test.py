from os.path import join

from settings.common import *

ENV = "test"

# Tests run against SQLite unless a database is given explicitly.
DB_URL = os.environ.get(
    "TEST_DATABASE_URL",
    "sqlite:///" + join(BASE_DIR, "test.sqlite3"),
)
DATABASES = {
    "default": dj_database_url.parse(DB_URL),
}

SENTRY_ENABLED = False
