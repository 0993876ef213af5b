"""
Reader: all file reads go through here.

No other module should call pl.read_parquet / pl.read_csv directly.
"""

import polars as pl
from pathlib import Path
from typing import Optional

from gaussianity.validation import InvalidInputError, TimeSeries


PARQUET_SUFFIXES = ('.parquet', '.pq')
CSV_SUFFIXES = ('.csv', '.txt')


def read_frame(path: str) -> pl.DataFrame:
    """Read a parquet or CSV file into a DataFrame."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"No such file: {path}")

    suffix = p.suffix.lower()
    if suffix in PARQUET_SUFFIXES:
        return pl.read_parquet(p)
    if suffix in CSV_SUFFIXES:
        return pl.read_csv(p, null_values=['', 'NA', 'NaN', 'nan'])

    raise InvalidInputError(
        f"Unsupported file type {suffix!r}; expected one of {PARQUET_SUFFIXES + CSV_SUFFIXES}"
    )


def read_series(path: str, column: Optional[str] = None, frequency: int = 1) -> TimeSeries:
    """
    Read one numeric column as a TimeSeries.

    Nulls come through as NaN so validation reports them as missing values.

    Args:
        path: parquet or CSV file
        column: Column to read; may be omitted for single-column files
        frequency: Sampling frequency to attach

    Returns:
        TimeSeries named after the column (values not yet validated)
    """
    df = read_frame(path)

    if column is None:
        if df.width != 1:
            raise InvalidInputError(
                f"{path} has {df.width} columns; pass column= one of {df.columns}"
            )
        column = df.columns[0]
    elif column not in df.columns:
        raise InvalidInputError(f"Column {column!r} not in {path} (columns: {df.columns})")

    if not df.schema[column].is_numeric():
        raise InvalidInputError(f"Column {column!r} is {df.schema[column]}, not numeric")

    values = df.get_column(column).cast(pl.Float64).fill_null(float('nan')).to_numpy()
    return TimeSeries(values=values, frequency=frequency, name=column)
