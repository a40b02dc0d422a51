"""Write fleet snapshots to Parquet files."""

from pathlib import Path
from typing import Iterable

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from fleet_status.config.constants import SNAPSHOT_COLUMNS
from fleet_status.fleet.truck import TruckRecord
from fleet_status.storage.schema_definition import SNAPSHOT_SCHEMA


class SnapshotWriter:
    """Writes truck snapshots to Parquet files."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def write(self, records: Iterable[TruckRecord], filename: str = "snapshot.parquet") -> Path:
        """Write one Parquet file holding the given records.

        Args:
            records: Trucks to write, in the order they should be read back.
            filename: File name inside output_dir.

        Returns:
            Path to the written Parquet file.
        """
        rows = [record.to_dict() for record in records]
        df = pd.DataFrame(rows, columns=SNAPSHOT_COLUMNS)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / filename

        table = pa.Table.from_pandas(df, schema=SNAPSHOT_SCHEMA, preserve_index=False)
        pq.write_table(table, output_path, compression="snappy")

        return output_path
