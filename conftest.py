import logging
import sqlite3

import pytest

from simpledbtools.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ('SIMPLEDBTOOLS_PREVIEW_ROWS', 'SIMPLEDBTOOLS_SQLITE_TIMEOUT', 'SIMPLEDBTOOLS_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    package_logger = logging.getLogger('simpledbtools')
    level = package_logger.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    package_logger.setLevel(level)


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / 'test.sqlite'
    conn = sqlite3.connect(path)
    conn.execute('CREATE TABLE employees (name TEXT, salary NUMERIC)')
    conn.executemany('INSERT INTO employees VALUES (?, ?)', [('Alice', 50000), ('Bob', 60000)])
    conn.commit()
    conn.close()
    return str(path)


@pytest.fixture
def conn(db_path):
    conn = sqlite3.connect(db_path)
    yield conn
    conn.close()


@pytest.fixture
def sample_csv(tmp_path):
    path = tmp_path / 'sample.csv'
    path.write_text('a,b\n1,2\n3,4\n5,6\n')
    return str(path)
