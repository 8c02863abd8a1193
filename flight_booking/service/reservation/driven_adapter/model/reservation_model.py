from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from flight_booking.platform.database.orm_db_setting import Base


class ReservationModel(Base):
    """One seat on one flight; rows are inserted and deleted, never updated"""

    __tablename__ = 'reservation'

    cust_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('customer.customer_id'), primary_key=True
    )
    flight_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('flight.fid'), primary_key=True, index=True
    )

    def __repr__(self):
        return f'<ReservationModel(cust_id={self.cust_id}, flight_id={self.flight_id})>'
