"""Quick looks at SQLite tables and CSV files: row previews and numeric column means."""
from simpledbtools.analysis import (
    ColumnType,
    CsvSummary,
    infer_column_types,
    load_csv,
    preview_table,
    summarize_frame,
    summarize_table,
)
from simpledbtools.config import Settings, get_settings
from simpledbtools.db import connect_db, list_tables, load_table, open_db, quote_identifier, table_schema
from simpledbtools.errors import DBConnectionError, ParseError, QueryError

__all__ = [
    'ColumnType',
    'CsvSummary',
    'DBConnectionError',
    'ParseError',
    'QueryError',
    'Settings',
    'connect_db',
    'get_settings',
    'infer_column_types',
    'list_tables',
    'load_csv',
    'load_table',
    'open_db',
    'preview_table',
    'quote_identifier',
    'summarize_frame',
    'summarize_table',
    'table_schema',
]
