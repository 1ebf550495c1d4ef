"""Password hashing for seeded accounts.

Hashes are bcrypt strings (``$2b$...``) so the Express server can check
them with bcryptjs ``compare``.
"""

import bcrypt

DEFAULT_ROUNDS = 10
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    # bcrypt ignores everything past 72 bytes; newer releases reject it instead
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password.
        rounds: bcrypt work factor.

    Returns:
        The bcrypt hash, salt included, as a string.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False
