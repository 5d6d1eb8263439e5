"""Error kinds surfaced by simpledbtools.

Nothing here wraps or re-raises; these are the collaborators' own
exception classes, grouped so callers can catch them by kind.
"""
import sqlite3

import pandas as pd

# Database file cannot be opened or created
DBConnectionError = sqlite3.OperationalError

# Bad table reference or unusable connection. pandas wraps execution
# failures in DatabaseError; a closed connection fails before that.
QueryError = (pd.errors.DatabaseError, sqlite3.Error)

# Malformed or empty delimited content
ParseError = (pd.errors.ParserError, pd.errors.EmptyDataError)

__all__ = ["DBConnectionError", "QueryError", "ParseError"]
