import datetime

from dateutil import tz

ZURICH = tz.gettz("Europe/Zurich")

# A Saturday
REFERENCE_TIMESTAMP = datetime.datetime(2020, 2, 1, 13, 14, 15, tzinfo=ZURICH)

# Relative formats are computed against this instant, a Monday
NOW = datetime.datetime(2020, 6, 1, 10, 0, 0, tzinfo=ZURICH)


def fixed_clock(instant: datetime.datetime):
    return lambda: instant
