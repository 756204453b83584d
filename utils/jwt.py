import jwt
from datetime import datetime, timedelta, timezone
from config.env_config import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRATION_MINUTES


# JWT creation
def create_jwt(user_id: str, email: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "email": email,
        "exp": now + timedelta(minutes=JWT_EXPIRATION_MINUTES),
        "iat": now
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)

# JWT decoding
def decode_jwt(token: str) -> dict | None:
    try:
        decoded = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
        return decoded
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
