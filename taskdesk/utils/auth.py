from passlib.context import CryptContext
from taskdesk.config import BCRYPT_ROUNDS

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

BCRYPT_MAX_BYTES = 72


class PasswordTooLong(ValueError):
    """The password does not fit in bcrypt's 72-byte input."""


def hash_password(password: str) -> str:
    """Hash a password after validating bcrypt's 72-byte limit.

    Raises PasswordTooLong if the UTF-8 encoding of the password exceeds 72 bytes.
    """
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise PasswordTooLong("password too long: must be at most 72 bytes when UTF-8 encoded")
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext password against a stored bcrypt hash.

    An over-long password can never match, so the ValueError passlib raises
    for it is reported as a mismatch rather than a server error.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False
