from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum
from pydantic import ValidationError
import os
from aws_lambda_powertools import Logger

# Import routers
from prompt_studio.routes.health import router as health_router
from prompt_studio.routes.generate_prompt import router as generate_prompt_router
from prompt_studio.routes.languages import router as languages_router


# ロギングの設定
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
logger = Logger(service="prompt_studio_api", level=LOG_LEVEL)

# FastAPIアプリケーションの初期化
app = FastAPI(
    title="Prompt Studio API",
    description="Turns a short idea into a refined English prompt with optional translation",
    version="1.0.0",
)

# CORS設定
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=ALLOWED_ORIGINS != ["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# Include routers
app.include_router(health_router)
app.include_router(languages_router)
app.include_router(generate_prompt_router)


# Exception handler for request and Pydantic validation errors
@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc):
    """Handle validation errors before any model call is made"""
    logger.error(f"Validation error: {exc}")

    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(f"{field}: {error['msg']}")

    return JSONResponse(status_code=422, content={"detail": errors})


# Lambda handler
handler = Mangum(app, lifespan="off")
