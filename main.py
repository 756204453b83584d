from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app_instance import app
from config.env_config import FRONTEND_ORIGINS
from config.log_config import get_logger
from routes.auth_routes import router as auth_router
from routes.ai_routes import router as ai_router
from routes.portfolio_routes import router as portfolio_router
from routes.pdf_routes import router as pdf_router

logger = get_logger("app")


app.add_middleware(
    CORSMiddleware,
    allow_origins=FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error on {request.url.path}\n{exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "details": str(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.get("/")
async def root():
    return {"ok": True, "message": "AI Resume Builder Backend Running"}


app.include_router(auth_router)
app.include_router(ai_router)
app.include_router(portfolio_router)
app.include_router(pdf_router)
