from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from controllers.auth_controller import register_user, login_user
from validation.user_types import UserRegister, UserLogin
from config.db import get_database

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
async def register(user_data: UserRegister, db: AsyncIOMotorDatabase = Depends(get_database)):
    return await register_user(user_data, db)


@router.post("/login")
async def login(user_data: UserLogin, db: AsyncIOMotorDatabase = Depends(get_database)):
    return await login_user(user_data, db)
