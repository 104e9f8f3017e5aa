from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    event_id: Mapped[str] = mapped_column(String(36), ForeignKey('event.id'), index=True)
    session_id: Mapped[Optional[str]] = mapped_column(String(36), ForeignKey('event_session.id'))
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
