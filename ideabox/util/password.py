"""Password hashing."""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plaintext password with argon2."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a plaintext password against a stored hash.

    Users created through another flow may have no password; they never match.
    """
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)
