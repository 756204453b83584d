import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from playwright.async_api import Browser, async_playwright

from config.env_config import CHROMIUM_EXECUTABLE_PATH, ENVIRONMENT, PDF_RENDER_TIMEOUT, RENDER
from config.log_config import get_logger
from services.exceptions import EmptyDocumentError, RenderEngineUnavailable, RenderTimeout

logger = get_logger("PDF_Service")


class BrowserLauncher:
    """
    Starts a headless Chromium for exactly one export.
    Subclasses only decide how the browser binary is found and which flags it gets.
    """

    name = "base"

    def launch_options(self) -> dict:
        raise NotImplementedError

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[Browser]:
        try:
            playwright = await async_playwright().start()
        except Exception as e:
            logger.error(f"Playwright driver failed to start ({self.name})\n{e}")
            raise RenderEngineUnavailable(str(e)) from e

        try:
            try:
                browser = await playwright.chromium.launch(**self.launch_options())
            except Exception as e:
                logger.error(f"Browser launch failed ({self.name})\n{e}")
                raise RenderEngineUnavailable(str(e)) from e

            logger.debug(f"Browser launched ({self.name})")
            try:
                yield browser
            finally:
                try:
                    await browser.close()
                    logger.debug("Browser closed")
                except Exception as e:
                    logger.warning(f"Browser close failed ({self.name})\n{e}")
        finally:
            try:
                await playwright.stop()
            except Exception as e:
                logger.warning(f"Playwright driver failed to stop ({self.name})\n{e}")


class LocalBrowserLauncher(BrowserLauncher):
    """Uses the Chromium build downloaded by `playwright install chromium`."""

    name = "local"

    def launch_options(self) -> dict:
        return {
            "headless": True,
            "args": ["--no-sandbox", "--disable-setuid-sandbox"],
        }


class HostedBrowserLauncher(BrowserLauncher):
    """Server containers: small /dev/shm, no GPU, sometimes a system Chromium."""

    name = "hosted"

    ARGS: List[str] = [
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
        "--disable-gpu",
        "--no-zygote",
        "--single-process",
    ]

    def __init__(self, executable_path: Optional[str] = CHROMIUM_EXECUTABLE_PATH):
        self.executable_path = executable_path

    def launch_options(self) -> dict:
        options = {"headless": True, "args": list(self.ARGS)}
        if self.executable_path:
            options["executable_path"] = self.executable_path
        return options


def get_browser_launcher() -> BrowserLauncher:
    if RENDER or ENVIRONMENT == "Production":
        return HostedBrowserLauncher()
    return LocalBrowserLauncher()


class PdfRenderer:
    def __init__(self, launcher: BrowserLauncher, timeout: float = PDF_RENDER_TIMEOUT):
        self.launcher = launcher
        self.timeout = timeout

    async def rasterize(self, html: str) -> bytes:
        try:
            pdf_bytes = await asyncio.wait_for(self._rasterize(html), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"PDF rendering exceeded {self.timeout}s")
            raise RenderTimeout(f"PDF rendering exceeded {self.timeout} seconds") from e

        if not pdf_bytes:
            raise EmptyDocumentError("Generated PDF is empty")

        logger.info(f"PDF rendered ({len(pdf_bytes)} bytes)")
        return bytes(pdf_bytes)

    async def _rasterize(self, html: str) -> bytes:
        async with self.launcher.acquire() as browser:
            page = await browser.new_page()
            # self-contained markup, nothing to fetch
            await page.set_content(html, wait_until="networkidle")
            return await page.pdf(
                format="A4",
                print_background=True,
                prefer_css_page_size=True,
            )


# Dependency for FastAPI
def get_pdf_renderer() -> PdfRenderer:
    return PdfRenderer(get_browser_launcher())
