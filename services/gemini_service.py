import asyncio
from functools import lru_cache
from langchain_google_genai import ChatGoogleGenerativeAI
from config.env_config import GEMINI_MODEL, GEMINI_RETRY_DELAY, GOOGLE_API_KEY
from config.log_config import get_logger

logger = get_logger("Gemini_Service")


class SummaryGenerator:
    def __init__(self, llm=None, retry_delay: float = GEMINI_RETRY_DELAY):
        self._llm = llm
        self.retry_delay = retry_delay

    @property
    def llm(self):
        # Built on first use so the app can boot without GOOGLE_API_KEY
        if self._llm is None:
            if not GOOGLE_API_KEY:
                logger.warning("GOOGLE_API_KEY missing, AI routes will fail")
            self._llm = ChatGoogleGenerativeAI(
                model=GEMINI_MODEL,
                google_api_key=GOOGLE_API_KEY,
                temperature=0.7,
            )
        return self._llm

    async def generate(self, prompt: str) -> str:
        result = await self.llm.ainvoke(prompt)
        content = getattr(result, "content", result)
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part) for part in content
            )
        return str(content)

    async def generate_with_retry(self, prompt: str, retries: int = 3) -> str:
        """
        Generate text for the prompt, retrying while Gemini reports 503 (overloaded).
        Any other error, or a 503 on the last attempt, is raised to the caller.
        """
        for attempt in range(1, retries + 1):
            try:
                return await self.generate(prompt)
            except Exception as e:
                if "503" in str(e) and attempt < retries:
                    logger.warning(f"Gemini overloaded, retrying ({attempt}/{retries})...")
                    await asyncio.sleep(self.retry_delay)
                else:
                    raise


# Dependency for FastAPI
@lru_cache
def get_summary_generator() -> SummaryGenerator:
    return SummaryGenerator()
