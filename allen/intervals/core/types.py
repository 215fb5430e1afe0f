from datetime import date, datetime
from typing import Any, Union

from pandas import Timestamp

# any totally ordered value can be used; these are the ones with a known locality
Instant = Union[int, float, date, datetime, Timestamp, Any]
Payload = tuple
