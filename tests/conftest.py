import os
import shutil
import tempfile

import pytest

# must be set before sleepcycle.config is imported, which happens at collection
_tmp = tempfile.mkdtemp(prefix="sleepcycle-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp}/test.db"


def pytest_sessionfinish(session, exitstatus):
    from sleepcycle.db import engine

    engine.dispose()
    shutil.rmtree(_tmp)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from sleepcycle.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def empty_records():
    from sleepcycle.db import session_scope
    from sleepcycle.main import app  # noqa: F401  (creates tables)
    from sleepcycle.records import clear_records

    with session_scope() as db:
        clear_records(db)
    yield
