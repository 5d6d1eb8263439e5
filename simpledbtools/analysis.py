import logging
import operator
import sqlite3
from enum import Enum
from typing import Dict, NamedTuple, Optional

import pandas as pd
from pandas.api import types as ptypes
from pydantic import BaseModel, Field, field_validator

from simpledbtools.config import get_settings
from simpledbtools.db import load_table, quote_identifier

logger = logging.getLogger(__name__)


class ColumnType(str, Enum):
    INTEGER = 'integer'
    FLOAT = 'float'
    TEXT = 'text'
    BOOLEAN = 'boolean'
    NULL = 'null'


NUMERIC_TYPES = (ColumnType.INTEGER, ColumnType.FLOAT)


class PreviewParams(BaseModel):
    n: int = Field(5, ge=0)

    @field_validator('n', mode='before')
    @classmethod
    def whole_number(cls, value):
        # Any integer type (numpy included); bool, float and str are refused
        if isinstance(value, bool):
            raise ValueError('row count must be an integer, not a bool')
        try:
            return operator.index(value)
        except TypeError:
            raise ValueError(f'row count must be an integer, got {type(value).__name__}') from None


class CsvSummary(NamedTuple):
    preview: pd.DataFrame
    summary: pd.DataFrame


def _preview_rows(n: Optional[int]) -> int:
    if n is None:
        n = get_settings().preview_rows
    return PreviewParams(n=n).n


def infer_column_types(df: pd.DataFrame) -> Dict[str, ColumnType]:
    """Classify each column of df by its pandas dtype."""
    type_map = {}
    for col in df.columns:
        series = df[col]
        if ptypes.is_bool_dtype(series):
            type_map[col] = ColumnType.BOOLEAN
        elif ptypes.is_integer_dtype(series):
            type_map[col] = ColumnType.INTEGER
        elif ptypes.is_float_dtype(series):
            type_map[col] = ColumnType.FLOAT
        elif series.isna().all():
            type_map[col] = ColumnType.NULL
        else:
            type_map[col] = ColumnType.TEXT
    return type_map


def summarize_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Mean of every numeric column, ignoring missing values, as a one-row DataFrame.

    Non-numeric columns are left out entirely. A numeric column with no
    values at all averages to NaN.
    """
    numeric_cols = [col for col, t in infer_column_types(df).items() if t in NUMERIC_TYPES]
    if numeric_cols:
        means = {col: df[col].astype('float64').mean(skipna=True) for col in numeric_cols}
        summary = pd.DataFrame([means], columns=numeric_cols)
    else:
        summary = pd.DataFrame(index=range(1))
    logger.debug(f"Summarized {len(numeric_cols)} numeric of {len(df.columns)} columns")
    return summary


def preview_table(conn: sqlite3.Connection, table_name: str, n: Optional[int] = None) -> pd.DataFrame:
    """Return the first n rows (default 5) of a table, in the engine's scan order."""
    limit = _preview_rows(n)
    df = pd.read_sql_query(f'SELECT * FROM {quote_identifier(table_name)} LIMIT ?;', conn, params=(limit,))
    logger.debug(f"Preview of '{table_name}' (limit {limit}), shape: {df.shape}")
    return df


def summarize_table(conn: sqlite3.Connection, table_name: str) -> pd.DataFrame:
    """Load a whole table and average its numeric columns."""
    return summarize_frame(load_table(conn, table_name))


def load_csv(file: str, n: Optional[int] = None) -> CsvSummary:
    """Read a CSV file, returning its first n rows and its numeric column means.

    Parsing uses pandas' defaults: comma separated, double-quoted, header
    row, column types inferred from the cells.
    """
    limit = _preview_rows(n)
    data = pd.read_csv(file)
    logger.debug(f"Read CSV {file}, shape: {data.shape}")
    return CsvSummary(preview=data.head(limit), summary=summarize_frame(data))
