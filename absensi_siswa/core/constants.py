"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Reserved class id meaning "no filter applied". It is never a real class.
WILDCARD_CLASS = "Semua"

# Literal strings the spreadsheet export produces instead of a real null.
PLACEHOLDER_CLASS_LABELS = frozenset({"", "undefined", "null"})

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%d-%m-%Y"

DEFAULT_PERCENT_DECIMALS = 2
DEFAULT_REQUEST_TIMEOUT = 15

MONTH_NAMES = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)

SEMESTER_MONTHS = {
    "1": MONTH_NAMES[6:],
    "2": MONTH_NAMES[:6],
}
