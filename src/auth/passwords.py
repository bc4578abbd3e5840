"""
bcrypt password hashing.
"""

import bcrypt

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """
    Hashes a password with a fresh salt; the result is stored in users.password.

    Raises:
        ValueError: the password is longer than MAX_PASSWORD_BYTES when encoded
    """
    encoded = password.encode()
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode()


def verify_password(password: str, hashed: str) -> bool:
    """
    Checks a password against a stored bcrypt hash.
    
    Raises:
        ValueError: the stored hash is not a valid bcrypt hash
    """
    return bcrypt.checkpw(password.encode(), hashed.encode())
