import os

APP_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
EXPORT_DIR = os.path.join(APP_DIR, "exports")

# Form defaults (also the "Réinitialiser" state)
DEFAULT_MIN_WEIGHT = 50
DEFAULT_MAX_WEIGHT = 100
DEFAULT_ROWS = 6
DEFAULT_SELECTION = frozenset({"sedentaire"})

MIN_ROWS = 2
MAX_ROWS = 50
MAX_PLAUSIBLE_WEIGHT = 400

WEIGHT_HEADER = "Poids (kg)"
RANGE_UNIT = "g/jour"

CSV_DELIMITER = ";"
CSV_LINE_SEPARATOR = "\n"
CSV_BOM = "\ufeff"
CSV_MEDIA_TYPE = "text/csv"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
