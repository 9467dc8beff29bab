import bcrypt

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int) -> str:
    """Salted bcrypt hash; the cost factor comes from BCRYPT_ROUNDS."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # over-long password or malformed stored hash
        return False
