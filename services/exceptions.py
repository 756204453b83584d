class PdfExportError(Exception):
    """Base class for failures while turning a resume into a PDF."""


class RenderEngineUnavailable(PdfExportError):
    """The headless browser could not be started in this environment."""


class EmptyDocumentError(PdfExportError):
    """The browser finished but produced zero bytes."""


class RenderTimeout(PdfExportError):
    """The browser did not finish rendering in time."""
