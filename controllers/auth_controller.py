from fastapi import status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError
from validation.user_types import UserRegister, UserLogin
from utils.jwt import create_jwt
from utils.security import hash_password, verify_password
from config.log_config import get_logger

logger = get_logger("auth_api")


async def register_user(user_data: UserRegister, db: AsyncIOMotorDatabase):
    if not user_data.name or not user_data.email or not user_data.password:
        return JSONResponse(
            content={"error": "All fields are required"},
            status_code=status.HTTP_400_BAD_REQUEST
        )

    try:
        users_collection = db.get_collection("users")

        existing_user = await users_collection.find_one({"email": user_data.email})
        if existing_user:
            return JSONResponse(
                content={"error": "User already exists"},
                status_code=status.HTTP_400_BAD_REQUEST
            )

        result = await users_collection.insert_one({
            "name": user_data.name,
            "email": user_data.email,
            "password": hash_password(user_data.password),
        })
        logger.info(f"User registered: {user_data.email}")

        return JSONResponse(
            content={
                "success": True,
                "id": str(result.inserted_id),
                "message": "User registered successfully"
            },
            status_code=status.HTTP_200_OK
        )

    except DuplicateKeyError:
        # lost a race against a concurrent signup with the same email
        return JSONResponse(
            content={"error": "User already exists"},
            status_code=status.HTTP_400_BAD_REQUEST
        )

    except Exception as e:
        logger.error(f"Register error: {e}")
        return JSONResponse(
            content={"error": "Registration failed", "details": str(e)},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


async def login_user(user_data: UserLogin, db: AsyncIOMotorDatabase):
    try:
        users_collection = db.get_collection("users")

        user = await users_collection.find_one({"email": user_data.email})
        if not user:
            return JSONResponse(
                content={"error": "User not found"},
                status_code=status.HTTP_400_BAD_REQUEST
            )

        if not verify_password(user_data.password or "", user.get("password")):
            return JSONResponse(
                content={"error": "Invalid password"},
                status_code=status.HTTP_400_BAD_REQUEST
            )

        token = create_jwt(user_id=str(user["_id"]), email=user["email"])

        return JSONResponse(
            content={"success": True, "token": token},
            status_code=status.HTTP_200_OK
        )

    except Exception as e:
        logger.error(f"Login error: {e}")
        return JSONResponse(
            content={"error": "Login failed"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
