from typing import AsyncContextManager, Callable, Optional

from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_password_hasher import IPasswordHasher
from flight_booking.service.reservation.app.interface.i_user_query_repo import IUserQueryRepo
from flight_booking.service.reservation.domain.entity.user_entity import UserEntity
from flight_booking.service.reservation.driven_adapter.model.customer_model import CustomerModel
from flight_booking.service.reservation.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: Optional[IPasswordHasher] = None,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher or BcryptPasswordHasher()

    @Logger.io
    async def verify_password(self, handle: str, plain_password: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(CustomerModel).where(CustomerModel.handle == handle)
            )
            customer_model = result.scalar_one_or_none()

            if not customer_model:
                return None

            # Use SecretStr to protect sensitive password data
            secret_password = SecretStr(plain_password)

            if not self.password_hasher.verify_password(
                plain_password=secret_password, hashed_password=customer_model.hashed_password
            ):
                return None

            return self._model_to_entity(customer_model)

    def _model_to_entity(self, customer_model: CustomerModel) -> UserEntity:
        return UserEntity(
            id=customer_model.customer_id,
            handle=customer_model.handle,
            full_name=customer_model.fullname,
        )
