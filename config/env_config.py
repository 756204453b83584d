import os
from dotenv import load_dotenv

load_dotenv()

# Development or Production Environment
ENVIRONMENT = os.environ.get("ENVIRONMENT", "Development")

# set to "true" by the hosting platform
RENDER = os.environ.get("RENDER", "false").lower() == "true"

PORT = int(os.environ.get("PORT", 4000))



# MongoDB configuration
MONGODB_URI = os.environ.get("MONGODB_URI") or "mongodb://localhost:27017/ai_resume_portfolio"
MONGODB_DB_NAME = os.environ.get("MONGODB_DB_NAME", "ai_resume_portfolio")



# JWT configuration
JWT_SECRET = os.environ.get("JWT_SECRET", "change-me-resume-builder-dev-secret-key")
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_MINUTES = int(os.environ.get("JWT_EXPIRATION_MINUTES", 60 * 24))



# Gemini configuration
GOOGLE_API_KEY = os.environ.get("GOOGLE_API_KEY")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_RETRY_DELAY = float(os.environ.get("GEMINI_RETRY_DELAY", 3))



# CORS
FRONTEND_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "FRONTEND_ORIGINS",
        "http://localhost:3000,"
        "https://ai-resume-builder-shibili-eight.vercel.app,"
        "https://shibili-ai-resume-builder-app-shibili8s-projects.vercel.app",
    ).split(",")
    if origin.strip()
]



# PDF rendering
CHROMIUM_EXECUTABLE_PATH = os.environ.get("CHROMIUM_EXECUTABLE_PATH")
PDF_RENDER_TIMEOUT = float(os.environ.get("PDF_RENDER_TIMEOUT", 60))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()
