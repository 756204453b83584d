from pydantic import BaseModel
from typing import Any, Dict, Optional


class PdfExportInput(BaseModel):
    # form is validated against ResumeForm inside the controller so a
    # missing form can be reported separately from a malformed one
    form: Optional[Dict[str, Any]] = None
    gensummary: Optional[str] = None


class SummaryPrompt(BaseModel):
    prompt: Optional[str] = None
