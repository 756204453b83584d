from fastapi import Request, HTTPException
from utils.jwt import decode_jwt


async def auth_required(request: Request):
    auth_header = request.headers.get("Authorization")

    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Unauthorized")

    token = auth_header.split(" ", 1)[1].strip()
    payload = decode_jwt(token)

    if not payload or "id" not in payload:
        raise HTTPException(status_code=401, detail="Invalid token")

    request.state.user = payload
    return payload
