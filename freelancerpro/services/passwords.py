"""Password hashing helpers backed by werkzeug."""

from werkzeug.security import check_password_hash, generate_password_hash

DEFAULT_METHOD = "scrypt"


def hash_password(password: str, method: str = DEFAULT_METHOD) -> str:
    """Return a salted hash of ``password``."""
    return generate_password_hash(password, method=method)


def verify_password(password: str, hashed_password: str) -> bool:
    """Check ``password`` against a stored hash.

    Malformed or empty hashes never match.
    """
    if not hashed_password:
        return False
    try:
        return check_password_hash(hashed_password, password)
    except ValueError:
        return False
