from fastapi import APIRouter, Depends
from controllers.pdf_controller import export_pdf, preview_resume_html
from services.pdf_service import PdfRenderer, get_pdf_renderer
from validation.resume_types import PdfExportInput

router = APIRouter(prefix="/pdf", tags=["pdf"])


@router.post("/export")
async def export(data: PdfExportInput, renderer: PdfRenderer = Depends(get_pdf_renderer)):
    return await export_pdf(data, renderer)


@router.post("/preview")
async def preview(data: PdfExportInput):
    return await preview_resume_html(data)
