from typing import Optional

from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_user_query_repo import IUserQueryRepo
from flight_booking.service.reservation.domain.entity.user_entity import UserEntity


class LogInUseCase:
    def __init__(self, user_query_repo: IUserQueryRepo):
        self.user_query_repo = user_query_repo

    @Logger.io
    async def execute(self, *, handle: str, password: str) -> Optional[UserEntity]:
        """Unknown handle and wrong password both return None"""
        return await self.user_query_repo.verify_password(handle, plain_password=password)
