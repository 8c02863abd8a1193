from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from flight_booking.platform.database.orm_db_setting import Base


class CarrierModel(Base):
    __tablename__ = 'carrier'

    cid: Mapped[str] = mapped_column(String(7), primary_key=True)
    name: Mapped[str] = mapped_column(String(83), nullable=False)

    def __repr__(self):
        return f'<CarrierModel(cid={self.cid}, name={self.name})>'
