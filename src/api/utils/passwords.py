from functools import lru_cache

import bcrypt

from config import ApplicationConfig


def hash_password(password: str) -> str:
    password_hash = bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return password_hash.decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))


def check_dummy_password(password: str) -> bool:
    """Burn one bcrypt comparison for an unknown account so timing matches; always False"""
    bcrypt.checkpw(password.encode("utf-8"), _dummy_hash(ApplicationConfig.BCRYPT_ROUNDS))
    return False
