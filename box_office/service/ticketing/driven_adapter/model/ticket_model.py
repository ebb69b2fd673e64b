from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from box_office.platform.database.orm_db_setting import Base


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    show_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('show.id', ondelete='CASCADE'), nullable=False, index=True
    )
    seat_id: Mapped[int] = mapped_column(Integer, ForeignKey('seat.id'), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('ticket_category.id'), nullable=False
    )
    status: Mapped[str] = mapped_column(String(20), default='available', nullable=False)
    holder_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    holder_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    holder_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # NULLs do not collide under a unique constraint
    barcode: Mapped[Optional[str]] = mapped_column(String(64), unique=True, nullable=True)
    reserved_by_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('user.id'), nullable=True
    )
    sold_by_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey('user.id'), nullable=True)
    reserved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    sold_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    checked_in_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (UniqueConstraint('show_id', 'seat_id', name='uq_ticket_show_seat'),)
