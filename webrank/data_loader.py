"""
Data loading utilities for page corpora.

A corpus is a table of pages with a 'uri' column and list-valued 'links' and
'words' columns, stored as a JSON array of records or as JSON lines.
"""

import ast
import pandas as pd
from pathlib import Path
from typing import Any, List, Union

from webrank.models import Page


REQUIRED_COLUMNS = ['uri']
LIST_COLUMNS = ['links', 'words']


def parse_list_cell(x: Any) -> List[str]:
    """
    Parse a list-like cell value (handles lists, JSON-like strings, nulls).

    Args:
        x: Value to parse (can be None, NaN, list, tuple, or list-like string)

    Returns:
        List of string values
    """
    if x is None:
        return []
    if isinstance(x, (list, tuple)):
        return [str(v) for v in x]
    if isinstance(x, float) and pd.isna(x):
        return []
    try:
        parsed = ast.literal_eval(x)
    except (ValueError, SyntaxError):
        # Fallback: strip brackets and split on commas
        s = str(x).strip()
        if s.startswith("[") and s.endswith("]"):
            s = s[1:-1].strip()
        if not s:
            return []
        return [e.strip().strip('"').strip("'") for e in s.split(",") if e.strip()]
    if isinstance(parsed, (list, tuple)):
        return [str(v) for v in parsed]
    return [str(parsed)]


def pages_from_dataframe(df: pd.DataFrame) -> List[Page]:
    """
    Convert a DataFrame of page records into Page objects.

    Args:
        df: DataFrame with a 'uri' column and optional 'links'/'words' columns

    Returns:
        List of pages in row order

    Raises:
        ValueError: If required columns are missing or a row has no uri
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Corpus must contain {missing} column(s). Found: {list(df.columns)}")

    missing_uri = df.index[df['uri'].isna()].tolist()
    if missing_uri:
        raise ValueError(f"Corpus rows without a uri: {missing_uri}")

    pages = []
    for row in df.itertuples(index=False):
        record = row._asdict()
        for col in LIST_COLUMNS:
            record[col] = parse_list_cell(record.get(col))
        pages.append(Page.from_dict(record))
    return pages


def load_pages(filepath: Union[str, Path], verbose: bool = False) -> List[Page]:
    """
    Load a page corpus from a JSON or JSON-lines file.

    Files ending in '.jsonl' are read as one record per line; anything else
    as a JSON array of records.

    Args:
        filepath: Path to the corpus file
        verbose: If True, print progress information

    Returns:
        List of pages

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If required columns are missing or a row has no uri
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Corpus file not found: {filepath}")

    lines = filepath.suffix == '.jsonl'
    df = pd.read_json(filepath, lines=lines, orient='records', dtype={'uri': object})

    pages = pages_from_dataframe(df) if len(df) > 0 else []
    if verbose:
        print(f"Loaded {len(pages)} pages from {filepath}")
    return pages
