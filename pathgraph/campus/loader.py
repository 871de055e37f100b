"""Parsing of tab-separated campus data files.

Two formats are supported, both with a header row:

- buildings: ``shortName  longName  x  y``
- paths:     ``x1  y1  x2  y2  distance``

Files are read with pandas; any source ``pandas.read_csv`` accepts (a path or
an open text buffer) can be passed in.
"""

from __future__ import annotations

from typing import Any, List, Sequence

import pandas as pd

from pathgraph.campus.records import CampusBuilding, CampusPath
from pathgraph.config import CAMPUS_CONFIG
from pathgraph.errors import DataFormatError
from pathgraph.logging import get_logger

logger = get_logger(__name__)

BUILDING_COLUMNS = ("shortName", "longName", "x", "y")
PATH_COLUMNS = ("x1", "y1", "x2", "y2", "distance")


def _read_table(
    source: Any, columns: Sequence[str], numeric: Sequence[str], separator: str
) -> pd.DataFrame:
    """Read ``source`` and coerce the ``numeric`` columns to float.

    Raises:
        DataFormatError: If a column is missing or a numeric cell is malformed.
    """
    try:
        # Blank lines are kept while reading so row labels map to file lines
        df = pd.read_csv(
            source,
            sep=separator,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
        )
    except pd.errors.EmptyDataError as exc:
        raise DataFormatError(f"No data in {source}.") from exc
    df.columns = [str(col).strip() for col in df.columns]

    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise DataFormatError(f"Missing column(s) {missing} in {source}.")

    df = df[list(columns)].fillna("")
    blank = pd.Series(True, index=df.index)
    for col in columns:
        blank &= df[col].str.strip() == ""
    df = df[~blank].copy()

    for col in numeric:
        values = pd.to_numeric(df[col].str.strip(), errors="coerce")
        bad_rows = values.index[values.isna()].tolist()
        if bad_rows:
            # +2: one for the header, one for 1-based line numbers
            lines = [row + 2 for row in bad_rows]
            raise DataFormatError(
                f"Non-numeric value in column '{col}' at line(s) {lines} of {source}."
            )
        df[col] = values.astype(float)
    return df


def load_buildings(
    source: Any, separator: str = CAMPUS_CONFIG.separator
) -> List[CampusBuilding]:
    """Parse a buildings file into `CampusBuilding` records.

    Raises:
        FileNotFoundError: If ``source`` is a path that does not exist.
        DataFormatError: If the file is malformed.
    """
    df = _read_table(source, BUILDING_COLUMNS, ("x", "y"), separator)
    buildings = [
        CampusBuilding(
            short_name=row.shortName,
            long_name=row.longName,
            x=float(row.x),
            y=float(row.y),
        )
        for row in df.itertuples(index=False)
    ]
    logger.info("Loaded %d building(s) from %s", len(buildings), source)
    return buildings


def load_paths(
    source: Any, separator: str = CAMPUS_CONFIG.separator
) -> List[CampusPath]:
    """Parse a paths file into `CampusPath` records.

    Raises:
        FileNotFoundError: If ``source`` is a path that does not exist.
        DataFormatError: If the file is malformed.
    """
    df = _read_table(source, PATH_COLUMNS, PATH_COLUMNS, separator)
    paths = [
        CampusPath(
            x1=float(row.x1),
            y1=float(row.y1),
            x2=float(row.x2),
            y2=float(row.y2),
            distance=float(row.distance),
        )
        for row in df.itertuples(index=False)
    ]
    logger.info("Loaded %d path(s) from %s", len(paths), source)
    return paths
