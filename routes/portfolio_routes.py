from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase
from controllers.portfolio_controller import save_portfolio, get_portfolios
from middlewares.verify_user import auth_required
from config.db import get_database

# User Authentication required for portfolio routes
router = APIRouter(prefix="/portfolio", tags=["portfolio"], dependencies=[Depends(auth_required)])


@router.post("")
async def create_portfolio(
    request: Request,
    portfolio: Dict[str, Any] = Body(...),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    user_id = request.state.user["id"]
    return await save_portfolio(portfolio, user_id, db)


@router.get("")
async def list_portfolios(request: Request, db: AsyncIOMotorDatabase = Depends(get_database)):
    user_id = request.state.user["id"]
    return await get_portfolios(user_id, db)
