from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from flight_booking.platform.database.orm_db_setting import Base


class CustomerModel(Base):
    __tablename__ = 'customer'

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    handle: Mapped[str] = mapped_column(String(20), nullable=False, unique=True, index=True)
    fullname: Mapped[str] = mapped_column(String(50), nullable=False, default='')
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self):
        return f'<CustomerModel(customer_id={self.customer_id}, handle={self.handle})>'
