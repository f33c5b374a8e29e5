import logging

from src.api.utils.jwt import issue_tokens
from src.api.utils.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccountStatus, User, UserRole
from src.domain.result import Error, Result, Return
from .dtos import AuthResponse, RegisterCommand, TokenInfo, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject an email that is already registered
    2. Hash password with bcrypt
    3. Create User with role=USER, status=PENDING_VERIFICATION
    4. Commit, then issue an access/refresh token pair
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "User already exists with this email")
                )

            user = User(
                email=command.email,
                password_hash=hash_password(command.password),
                first_name=command.first_name,
                last_name=command.last_name,
                role=UserRole.user,
                status=AccountStatus.pending_verification,
            )
            user = await self.uow.users.create(user)
            await self.uow.commit()

            logger.info(f"User registered: {user.id}")

            tokens = issue_tokens(user.id, user.role.value)
            return Return.ok(
                AuthResponse(
                    message="User registered successfully",
                    user=UserInfo.from_entity(user),
                    tokens=TokenInfo.from_pair(tokens),
                )
            )
