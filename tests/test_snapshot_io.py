"""Tests for snapshot loading and Parquet output."""

import json
from pathlib import Path

import pandas as pd
import pyarrow.parquet as pq
import pytest

from fleet_status.fleet.truck import TruckRecord
from fleet_status.storage.schema_definition import SNAPSHOT_SCHEMA
from fleet_status.storage.snapshot_reader import load_snapshot, records_from_frame
from fleet_status.storage.snapshot_writer import SnapshotWriter


class TestSnapshotWriter:
    def test_parquet_schema_and_order(self, tmp_path: Path, fleet):
        path = SnapshotWriter(tmp_path / "archive").write(fleet)

        assert path.exists()
        table = pq.read_table(path)
        assert table.schema.equals(SNAPSHOT_SCHEMA)
        assert table.num_rows == len(fleet)
        assert load_snapshot(path) == fleet

    def test_empty_snapshot(self, tmp_path: Path):
        path = SnapshotWriter(tmp_path).write([], "empty.parquet")
        assert pq.read_table(path).num_rows == 0
        assert load_snapshot(path) == []


class TestSnapshotReader:
    def test_csv_export_headers(self, tmp_path: Path):
        """The dashboard's CSV export loads back as records."""
        path = tmp_path / "trucks.csv"
        pd.DataFrame([
            {"Plate No": "W1", "Category": "Walia", "Status": "Loading",
             "Current Location": "Addis", "From": "", "Destination": "", "Note": ""},
            {"Plate No": "D1", "Category": "Djibouti", "Status": "Ongoing",
             "Current Location": "Mile X", "From": "", "Destination": "Djibouti",
             "Note": "via galafi"},
        ]).to_csv(path, index=False)

        records = load_snapshot(path)

        assert records == [
            TruckRecord("W1", "Walia", "Loading", current_location="Addis"),
            TruckRecord("D1", "Djibouti", "Ongoing", current_location="Mile X",
                        destination="Djibouti", note="via galafi"),
        ]

    def test_json_camel_case(self, tmp_path: Path):
        path = tmp_path / "trucks.json"
        path.write_text(json.dumps([
            {"plateNo": "W1", "category": "Walia", "status": "Ongoing",
             "fromLocation": "Addis", "destination": "Hawassa", "currentLocation": "Mojo"},
            {"plateNo": "B1", "category": "BGI", "status": "Parked", "note": None},
        ]))

        records = load_snapshot(path)

        assert [r.plate_no for r in records] == ["W1", "B1"]
        assert records[0].from_location == "Addis"
        assert records[0].current_location == "Mojo"
        assert records[1].note is None
        assert records[1].destination is None

    def test_rows_without_plate_skipped(self):
        df = pd.DataFrame([
            {"plate_no": "W1", "status": "Loading"},
            {"plate_no": "  ", "status": "Loading"},
            {"plate_no": None, "status": "Parked"},
        ])
        assert [r.plate_no for r in records_from_frame(df)] == ["W1"]

    def test_missing_plate_column_rejected(self):
        df = pd.DataFrame([{"category": "Walia", "status": "Loading"}])
        with pytest.raises(ValueError, match="plate"):
            records_from_frame(df)

    def test_unsupported_format_rejected(self, tmp_path: Path):
        path = tmp_path / "trucks.xlsx"
        path.write_bytes(b"")
        with pytest.raises(ValueError, match="Unsupported snapshot format"):
            load_snapshot(path)


class TestTruckRecord:
    def test_from_mapping_cleans_values(self):
        record = TruckRecord.from_mapping({
            "plate_no": " A1 ", "category": "", "status": float("nan"),
            "note": "  late ", "id": 17, "created_at": "2026-10-19",
        })
        assert record == TruckRecord("A1", note="late")

    def test_to_dict_columns(self):
        record = TruckRecord("A1", "Walia")
        assert list(record.to_dict()) == [
            "plate_no", "category", "status", "current_location",
            "from_location", "destination", "note",
        ]
