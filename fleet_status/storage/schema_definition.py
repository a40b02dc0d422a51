"""PyArrow schema definition for fleet snapshot files."""

import pyarrow as pa

from fleet_status.config.constants import SNAPSHOT_COLUMNS


def build_snapshot_schema() -> pa.Schema:
    """Build the PyArrow schema for snapshot Parquet files.

    One nullable string column per TruckRecord field, in SNAPSHOT_COLUMNS order.
    """
    return pa.schema([pa.field(col, pa.string(), nullable=True) for col in SNAPSHOT_COLUMNS])


SNAPSHOT_SCHEMA = build_snapshot_schema()
