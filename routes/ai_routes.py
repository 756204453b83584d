from fastapi import APIRouter, Depends
from controllers.ai_controller import generate_summary
from services.gemini_service import SummaryGenerator, get_summary_generator
from validation.resume_types import SummaryPrompt

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/generate")
async def generate(
    data: SummaryPrompt,
    generator: SummaryGenerator = Depends(get_summary_generator),
):
    return await generate_summary(data, generator)
