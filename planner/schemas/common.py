"""Types shared by the response schemas."""
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from planner.database import as_utc

# Timestamps leave the API as aware UTC, whatever the store hands back
UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]
