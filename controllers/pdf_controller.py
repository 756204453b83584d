from fastapi import status
from fastapi.responses import JSONResponse, Response, HTMLResponse
from pydantic import ValidationError
from models.resume_model import ResumeForm
from services.exceptions import EmptyDocumentError, RenderEngineUnavailable, RenderTimeout
from services.pdf_service import PdfRenderer
from utils.file_name import derive_pdf_file_name
from utils.normalize_resume import clean_summary, normalize_form
from utils.resume_html import build_resume_html
from validation.resume_types import PdfExportInput
from config.log_config import get_logger

logger = get_logger("pdf_api")


def _error(message: str, details: str | None = None, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
    content = {"error": message}
    if details:
        content["details"] = details
    return JSONResponse(content=content, status_code=status_code)


def prepare_resume_html(data: PdfExportInput) -> tuple[ResumeForm, str]:
    """Validate + normalize the form and assemble the HTML document."""
    form = normalize_form(ResumeForm.model_validate(data.form))
    return form, build_resume_html(form, clean_summary(data.gensummary))


async def export_pdf(data: PdfExportInput, renderer: PdfRenderer):
    logger.info("PDF export request received")

    if data.form is None:
        return _error("Form data missing", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        form, html = prepare_resume_html(data)
        pdf_bytes = await renderer.rasterize(html)

    except ValidationError as e:
        logger.warning(f"Invalid form data\n{e}")
        return _error("Invalid form data", str(e), status.HTTP_400_BAD_REQUEST)

    except RenderEngineUnavailable as e:
        return _error("Failed to launch browser", str(e))

    except EmptyDocumentError:
        logger.error("Generated PDF is empty")
        return _error("Generated PDF is empty")

    except RenderTimeout as e:
        return _error("PDF rendering timed out", str(e))

    except Exception as e:
        logger.exception(f"PDF EXPORT ERROR: {e}")
        return _error("PDF generation failed", str(e))

    file_name = derive_pdf_file_name(form.name)
    logger.info(f"PDF exported as {file_name}")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{file_name}"',
            "Content-Length": str(len(pdf_bytes)),
        },
    )


async def preview_resume_html(data: PdfExportInput):
    if data.form is None:
        return _error("Form data missing", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        _, html = prepare_resume_html(data)
        return HTMLResponse(content=html, status_code=status.HTTP_200_OK)
    except ValidationError as e:
        return _error("Invalid form data", str(e), status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.exception(f"Resume preview failed: {e}")
        return _error("Resume preview failed", str(e))
