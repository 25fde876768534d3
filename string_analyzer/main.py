from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from string_analyzer import config
from string_analyzer.api import router
from string_analyzer.database import StringStore, get_db, init_db
from string_analyzer.schemas import HealthResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

if config.ENV_FILE_LOADED:
    logger.info("Loaded settings from .env file (local development)")

app = FastAPI(
    title=config.APP_TITLE,
    description="Analyze, store and query string properties",
    version=config.APP_VERSION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# The store is owned by the app and handed to routes through get_db
app.state.store = init_db()

app.include_router(router, tags=["strings"])


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": config.APP_TITLE,
        "version": config.APP_VERSION,
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings/{string_value}": "Get specific string analysis",
            "GET /strings/id/{string_id}": "Get string analysis by SHA-256 id",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{string_value}": "Delete a string",
            "GET /health": "Health check"
        }
    }


@app.get("/health", response_model=HealthResponse)
def health_check(db: StringStore = Depends(get_db)):
    """Health check endpoint"""
    return HealthResponse(status="healthy", strings=db.count())


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    wrong_value_type = False
    for error in exc.errors():
        loc = error.get('loc', ())
        field = str(loc[-1]) if loc else "request"
        errors[field] = error['msg']
        if tuple(loc) == ("body", "value") and error.get('type') == "string_type" and error.get('input') is not None:
            wrong_value_type = True

    if wrong_value_type:
        logger.warning("Rejected request: 'value' must be a string")
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid data type for 'value' (must be string)",
                "details": errors
            }
        )

    logger.warning(f"Rejected request on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "details": errors
        }
    )


# HTTPException handler
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # If detail is already a dict with 'error' key, return as is
    if isinstance(exc.detail, dict) and 'error' in exc.detail:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail
        )
    # Otherwise wrap it
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)}
    )


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error"
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT, reload=config.RELOAD)
