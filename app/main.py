from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from app.config import get_settings
from app.core.exceptions import DocumentLoadError, InvalidFileException
from app.logging_config import configure_logging

# IMPORT ROUTERS
from app.routers.health import router as health_router
from app.routers.financial_report import router as financial_report_router
from app.routers.financial_report import (
    invalid_file_exception_handler,
    validation_exception_handler,
)

settings = get_settings()
configure_logging(settings)


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Financial Report"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(DocumentLoadError, invalid_file_exception_handler)
app.add_exception_handler(InvalidFileException, invalid_file_exception_handler)

# REGISTER ROUTERS
app.include_router(health_router)             # Health
app.include_router(financial_report_router)   # Financial Report


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "upload": f"{settings.API_PREFIX}/upload",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
