from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from box_office.platform.database.orm_db_setting import Base


class SectionModel(Base):
    __tablename__ = 'section'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    floor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('floor.id', ondelete='CASCADE'), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # orchestra | balcony | box | left_wing | center | right_wing
    type: Mapped[str] = mapped_column(String(20), default='orchestra', nullable=False)


class SeatModel(Base):
    __tablename__ = 'seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    section_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('section.id', ondelete='CASCADE'), nullable=False, index=True
    )
    row: Mapped[str] = mapped_column(String(10), nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    __table_args__ = (UniqueConstraint('section_id', 'row', 'number', name='uq_seat_position'),)
