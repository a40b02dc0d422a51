"""Shared test fixtures."""

from datetime import datetime

import pytest

from fleet_status.fleet.truck import TruckRecord


@pytest.fixture
def morning():
    return datetime(2026, 10, 19, 9, 5)


@pytest.fixture
def afternoon():
    return datetime(2026, 10, 19, 15, 30)


@pytest.fixture
def fleet():
    """Mixed snapshot: Djibouti corridor, one busy brand, idle trucks."""
    return [
        TruckRecord("A1", "Djibouti", "Ongoing", current_location="Mile X",
                    destination="Djibouti", note="via galafi"),
        TruckRecord("D2", "Djibouti", "Ongoing", current_location="Awash",
                    destination="Djibouti", note="empty"),
        TruckRecord("D3", "Djibouti", "Unloading", current_location="Modjo"),
        TruckRecord("D4", "Djibouti", "Ongoing", current_location="Semera",
                    from_location="Djibouti", destination="Addis"),
        TruckRecord("D5", "Djibouti", "Oncoming", current_location="Dire Dawa",
                    from_location="Djibouti", destination="Addis"),
        TruckRecord("W1", "Walia", "Loading", current_location="Addis", note="cement"),
        TruckRecord("W2", "Walia", "Loading", current_location="Adama"),
        TruckRecord("W3", "Walia", "Unloading", current_location="Hawassa", note="late"),
        TruckRecord("W4", "Walia", "Ongoing", current_location="Mojo",
                    from_location="Addis", destination="Hawassa"),
        TruckRecord("W5", "Walia", "Oncoming", current_location="Bishoftu",
                    from_location="Hawassa", destination="Addis"),
        TruckRecord("B1", "BGI", "Parked", note="weekend"),
        TruckRecord("B2", "BGI", "Garage", note="brakes"),
        TruckRecord("H1", "Habesha", "No Driver", note="driver on leave"),
        TruckRecord("H2", "Habesha", "Insurance", note="claim"),
    ]
