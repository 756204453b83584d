from datetime import datetime, timezone
from fastapi import status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase
from models.resume_model import EducationEntry
from utils.normalize_resume import normalize_education
from utils.serialize_doc import serialize_doc
from config.log_config import get_logger

logger = get_logger("portfolio_api")


async def save_portfolio(portfolio: dict, user_id: str, db: AsyncIOMotorDatabase):
    try:
        education = [EducationEntry.model_validate(e) for e in portfolio.get("education") or []]

        data = {
            **portfolio,
            "education": [
                e.model_dump(exclude_unset=True) for e in normalize_education(education)
            ],
            "userId": user_id,
            "createdAt": datetime.now(timezone.utc),
        }

        result = await db.get_collection("portfolios").insert_one(data)
        logger.info(f"Portfolio saved for user {user_id}")

        return JSONResponse(
            content={
                "success": True,
                "id": str(result.inserted_id),
                "message": "Portfolio saved successfully"
            },
            status_code=status.HTTP_200_OK
        )

    except Exception as e:
        logger.error(f"Error saving portfolio: {e}")
        return JSONResponse(
            content={"error": "Failed to save portfolio"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


async def get_portfolios(user_id: str, db: AsyncIOMotorDatabase):
    try:
        cursor = db.get_collection("portfolios").find({"userId": user_id})
        portfolios = await cursor.to_list(length=None)

        return JSONResponse(
            content=serialize_doc(portfolios),
            status_code=status.HTTP_200_OK
        )

    except Exception as e:
        logger.error(f"Error fetching portfolios: {e}")
        return JSONResponse(
            content={"error": "Failed to fetch portfolio"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
