from typing import Optional

import attrs


@attrs.define
class TicketEntity:
    event_id: str
    name: str
    price: int
    quantity: int
    session_id: Optional[str] = None
    id: Optional[str] = None
