import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Tuple

import pandas as pd

from simpledbtools.config import get_settings

logger = logging.getLogger(__name__)

# SQLite column affinity, decided by the first matching rule on the declared type
NUMERIC_AFFINITIES = ('INTEGER', 'REAL', 'NUMERIC')


def quote_identifier(name: str) -> str:
    """Quote a table or column name for use in SQL text."""
    return '"' + str(name).replace('"', '""') + '"'


def connect_db(path: str) -> sqlite3.Connection:
    """Open the SQLite database at path, creating the file if it does not exist.

    The caller owns the returned connection and is responsible for closing it.
    """
    settings = get_settings()
    logger.debug(f"Opening SQLite database: {path}")
    return sqlite3.connect(path, timeout=settings.sqlite_timeout)


@contextmanager
def open_db(path: str) -> Iterator[sqlite3.Connection]:
    """Like connect_db, but closes the connection when the block exits."""
    conn = connect_db(path)
    try:
        yield conn
    finally:
        conn.close()
        logger.debug(f"Closed SQLite database: {path}")


def list_tables(conn: sqlite3.Connection) -> List[str]:
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name;"
    )
    return [row[0] for row in cursor.fetchall()]


def table_schema(conn: sqlite3.Connection, table_name: str) -> List[Tuple[str, str]]:
    """Return (column, declared type) pairs; empty if the table is unknown."""
    cursor = conn.execute(f'PRAGMA table_info({quote_identifier(table_name)});')
    return [(col[1], col[2]) for col in cursor.fetchall()]


def column_affinity(declared_type: str) -> str:
    declared = (declared_type or '').upper()
    if 'INT' in declared:
        return 'INTEGER'
    if any(token in declared for token in ('CHAR', 'CLOB', 'TEXT')):
        return 'TEXT'
    if 'BLOB' in declared or not declared:
        return 'BLOB'
    if any(token in declared for token in ('REAL', 'FLOA', 'DOUB')):
        return 'REAL'
    return 'NUMERIC'


def has_numeric_affinity(declared_type: str) -> bool:
    return column_affinity(declared_type) in NUMERIC_AFFINITIES


def load_table(conn: sqlite3.Connection, table_name: str) -> pd.DataFrame:
    """Read every row of a table into a DataFrame.

    Columns pandas could not type (no non-null values) fall back to the
    declared SQLite type, so an empty or all-NULL numeric column stays numeric.
    """
    df = pd.read_sql_query(f'SELECT * FROM {quote_identifier(table_name)};', conn)
    logger.debug(f"Loaded table '{table_name}', shape: {df.shape}")
    for col, declared in table_schema(conn, table_name):
        if col not in df.columns or df[col].dtype != object:
            continue
        if df[col].isna().all() and has_numeric_affinity(declared):
            df[col] = df[col].astype('float64')
            logger.debug(f"Cast all-missing column '{col}' ({declared}) to float64")
    return df
