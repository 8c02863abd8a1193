from abc import ABC, abstractmethod
from typing import Optional

from flight_booking.service.reservation.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    @abstractmethod
    async def verify_password(self, handle: str, plain_password: str) -> Optional[UserEntity]:
        pass
