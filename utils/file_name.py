import re
from typing import Optional

MAX_FILE_NAME_LENGTH = 40

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def derive_pdf_file_name(name: Optional[str]) -> str:
    base = (name or "").strip() or "resume"
    return _UNSAFE_CHARS.sub("_", base)[:MAX_FILE_NAME_LENGTH] + ".pdf"
