"""Load a fleet snapshot (CSV, JSON or Parquet) into TruckRecords."""

import logging
from pathlib import Path
from typing import List

import pandas as pd
import pyarrow.parquet as pq

from fleet_status.config.constants import COLUMN_ALIASES, SNAPSHOT_SUFFIXES
from fleet_status.fleet.truck import TruckRecord

logger = logging.getLogger(__name__)


def read_frame(path: Path) -> pd.DataFrame:
    """Read a snapshot file into a DataFrame, picking the reader by suffix."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix == ".json":
        return pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    if suffix == ".parquet":
        return pq.read_table(path).to_pandas()

    raise ValueError(
        f"Unsupported snapshot format '{suffix}' for {path}; "
        f"expected one of {', '.join(SNAPSHOT_SUFFIXES)}"
    )


def records_from_frame(df: pd.DataFrame) -> List[TruckRecord]:
    """Convert snapshot rows to records, keeping row order.

    Rows without a plate number are skipped.
    """
    if df.empty:
        return []

    df = df.rename(columns=COLUMN_ALIASES)
    if "plate_no" not in df.columns:
        raise ValueError(
            f"Snapshot has no plate number column (columns: {', '.join(map(str, df.columns))})"
        )

    records = []
    skipped = 0
    for row in df.to_dict(orient="records"):
        record = TruckRecord.from_mapping(row)
        if record.plate_no is None:
            skipped += 1
            continue
        records.append(record)

    if skipped:
        logger.warning(f"Skipped {skipped} snapshot rows without a plate number")
    return records


def load_snapshot(path: Path) -> List[TruckRecord]:
    """Load a snapshot file into a list of TruckRecords."""
    df = read_frame(path)
    records = records_from_frame(df)
    logger.info(f"Loaded {len(records)} trucks from {path}")
    return records
