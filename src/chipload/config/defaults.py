"""Default file names and empirical tuning constants.

The chipload deviation and the beginner multipliers are shop-floor
values; keep them as they are.
"""

from pathlib import Path

from ..core.units import FEED_UNIT

# File names used when the CLI is given none
CHIPLOAD_TABLE_NAME = "ChiploadTable.csv"
REQUEST_FILE_NAME = "SpeedNFeeds.txt"
REPORT_FILE_NAME = "MyTools.txt"

# Starter table shipped with the package
BUNDLED_TABLE = Path(__file__).resolve().parent.parent / "data" / CHIPLOAD_TABLE_NAME

# Half-width of the chipload band for quality codes 1, 2, 4 and 5 (mm/tooth)
MAX_DEVIATION = 0.01
# Finish/removal modes cut with half the tabulated chipload
BAND_CHIPLOAD_SCALE = 0.5

# Beginner mode: balanced point, then slower spindle and much slower feed
BEGINNER_RPM_SCALE = 0.9
BEGINNER_FEED_SCALE = 0.5

DEFAULT_TOOTH_COUNT = 2
MAX_TOOTH_COUNT = 4
DEFAULT_OUT_UNIT = FEED_UNIT.value
