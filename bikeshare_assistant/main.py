from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from bikeshare_assistant.core.config import settings
from bikeshare_assistant.core.logger import logger, log_error
from bikeshare_assistant.api.fulfillment.routes_fulfillment import router as fulfillment_router

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Voice assistant fulfillment for finding nearby bike-share stations",
    version=settings.APP_VERSION
)

# The webhook is called server to server, no credentials involved
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Flatten validation errors into readable messages"""
    errors = exc.errors()
    logger.warning(f"Validation error: {request.method} {request.url.path} - {errors}")

    formatted_errors = [
        f"{' -> '.join(str(x) for x in error['loc'])}: {error['msg']}"
        for error in errors
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Invalid request data",
            "errors": formatted_errors
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler for unexpected errors"""
    log_error(f"{request.method} {request.url.path}", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred. Please try again later.",
            "type": type(exc).__name__ if settings.DEBUG else None
        }
    )


app.include_router(fulfillment_router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    logger.info(
        f"Starting {settings.APP_NAME} v{settings.APP_VERSION} - "
        f"contract {settings.BIKES_CONTRACT}, log level {settings.LOG_LEVEL}, debug {settings.DEBUG}"
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.APP_VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "bikeshare_assistant.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
