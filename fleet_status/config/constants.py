"""Status markers, category orderings, report texts and snapshot columns."""

# =============================================================================
# Classified Statuses
# =============================================================================

LOADING = "Loading"
UNLOADING = "Unloading"
ONGOING = "Ongoing"
ONCOMING = "Oncoming"
PARKED = "Parked"
GARAGE = "Garage"
NODE = "Node"
INSURANCE = "Insurance"
OTHER = "Other"

CLASSIFIED_STATUSES = [
    LOADING, UNLOADING, ONGOING, ONCOMING,
    PARKED, GARAGE, NODE, INSURANCE, OTHER,
]

# Substring rules, first match wins.
# "unload" must be tested before "load".
STATUS_RULES = [
    ("unload",  UNLOADING),
    ("load",    LOADING),
    ("ongoin",  ONGOING),
    ("oncomin", ONCOMING),
    ("park",    PARKED),
    ("garage",  GARAGE),
    ("node",    NODE),
    ("insur",   INSURANCE),
]

# =============================================================================
# Activity
# =============================================================================

# Raw statuses (lowercased) that make a truck inactive on exact match
INACTIVE_STATUSES = {"garage", "parked", "insurance"}

# Raw status substrings that make a truck inactive
INACTIVE_MARKERS = ("node", "no driver")

NO_DRIVER_MARKER = "no driver"

# =============================================================================
# Categories
# =============================================================================

DJIBOUTI = "Djibouti"
GALAFI_MARKER = "galafi"

UNCATEGORIZED = "Uncategorized"
UNKNOWN_KEY = "Unknown"

# Brand sections of the full report, in print order
BRAND_CATEGORIES = ["Walia", "BGI", "Leshato", "Habesha", "Unilever"]

# Fixed categories of the summary breakdown
SUMMARY_CATEGORIES = [DJIBOUTI] + BRAND_CATEGORIES

# Dashboard chips: (category key, label); None counts the whole fleet
CHIP_CATEGORIES = [
    (None,       "ALL"),
    ("Djibouti", "DJIBOUTI"),
    ("Walia",    "WALIA"),
    ("BGI",      "BGI"),
    ("Leshato",  "LESHATO"),
    ("Habesha",  "HABESHA"),
]

# =============================================================================
# Summary Labels
# =============================================================================

LABEL_CROSSED = "Empty Trucks Crossed to DJIBOUTI"
LABEL_ONGOING_EMPTY = "ONGOING EMPTY TRUCKS TO DJIBOUTI"
LABEL_DJIBOUTI_TO = "DJIBOUTI TO"
LABEL_ONGOING_FROM = "ONGOING TRUCKS FROM"
LABEL_ONCOMING_TO = "ONCOMING TRUCKS TO"
LABEL_LOADING = "LOADING"
LABEL_UNLOADING = "UNLOADING"

# =============================================================================
# Rendering
# =============================================================================

MISSING_LOCATION = "?"
MISSING_PLATE = "?"
EMPTY_PLACEHOLDER = "-"

TREE_BRANCH = "├─"
TREE_LAST = "└─"

DATE_FORMAT = "%d/%m/%Y"
CLOCK_FORMAT = "%I:%M %p"
AFTERNOON_FROM_HOUR = 12

GREETING_TEMPLATE = "Good {greeting} Dear All,"
FULL_REPORT_TITLE = "TRUCK STATUS REPORT"
SUMMARY_REPORT_TITLE = "TRUCK STATUS SUMMARY"
SECTION_SEPARATOR = "------------------------------"
CLOSING_LINE = "Thank you & Regards."

# =============================================================================
# Snapshot Columns
# =============================================================================

SNAPSHOT_COLUMNS = [
    "plate_no",
    "category",
    "status",
    "current_location",
    "from_location",
    "destination",
    "note",
]

# camelCase keys and dashboard CSV export headers, mapped to snapshot columns
COLUMN_ALIASES = {
    "plateNo": "plate_no",
    "currentLocation": "current_location",
    "fromLocation": "from_location",
    "Plate No": "plate_no",
    "Category": "category",
    "Status": "status",
    "Current Location": "current_location",
    "From": "from_location",
    "Destination": "destination",
    "Note": "note",
}

SNAPSHOT_SUFFIXES = (".csv", ".json", ".parquet")
