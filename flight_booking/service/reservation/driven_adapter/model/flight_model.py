from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from flight_booking.platform.database.orm_db_setting import Base


class FlightModel(Base):
    __tablename__ = 'flight'
    __table_args__ = (
        Index('ix_flight_route_date', 'origin_city', 'dest_city', 'year', 'month_id', 'day_of_month'),
    )

    fid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    month_id: Mapped[int] = mapped_column(Integer, nullable=False)
    day_of_month: Mapped[int] = mapped_column(Integer, nullable=False)
    carrier_id: Mapped[str] = mapped_column(String(7), ForeignKey('carrier.cid'), nullable=False)
    flight_num: Mapped[str] = mapped_column(String(10), nullable=False)
    origin_city: Mapped[str] = mapped_column(String(34), nullable=False)
    dest_city: Mapped[str] = mapped_column(String(34), nullable=False)
    # minutes; NULL for cancelled or unknown flights
    actual_time: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self):
        return (
            f'<FlightModel(fid={self.fid}, {self.origin_city} -> {self.dest_city}, '
            f'{self.year}-{self.month_id}-{self.day_of_month})>'
        )
