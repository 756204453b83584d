from fastapi import status
from fastapi.responses import JSONResponse
from services.gemini_service import SummaryGenerator
from validation.resume_types import SummaryPrompt
from config.log_config import get_logger

logger = get_logger("ai_api")


async def generate_summary(data: SummaryPrompt, generator: SummaryGenerator):
    if not data.prompt or not data.prompt.strip():
        return JSONResponse(
            content={"error": "Prompt is required"},
            status_code=status.HTTP_400_BAD_REQUEST
        )

    try:
        logger.info(f"Generating summary using Gemini...\nPrompt received: {data.prompt}")
        summary = await generator.generate_with_retry(data.prompt)

        return JSONResponse(
            content={"success": True, "summary": summary.strip()},
            status_code=status.HTTP_200_OK
        )

    except Exception as e:
        logger.error(f"AI Generation Error: {e}")
        return JSONResponse(
            content={"error": "AI generation failed", "details": str(e)},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
