from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class SessionEntity:
    event_id: str
    name: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    id: Optional[str] = None
