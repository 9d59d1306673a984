import json
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.errors import GenerationError
from app.core.security import gemini_key_status
from app.schemas.response import ErrorResponse, GenerateResponse
from app.services.generation_service import generate_resume
from app.utils.logger import logger, setup_logging

GENERATE_PATH = "/api/generate"
ALLOWED_METHODS = ["POST"]
# Every method is routed to the handler so non-POST requests get the JSON 405 body
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(get_settings().log_level)
    yield


app = FastAPI(title="AI Resume Snippet Generator", lifespan=lifespan)


@app.exception_handler(GenerationError)
async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/")
async def root():
    return {
        "message": "AI Resume Snippet Generator API",
        "docs": "/docs",
        "health": "/health",
        "generate": f"POST {GENERATE_PATH}",
    }


@app.get("/health")
async def get_health():
    gemini = gemini_key_status()
    return {
        "status": "ok" if gemini == "configured" else "degraded",
        "providers": {"gemini": gemini},
    }


async def _read_json_body(request: Request) -> object:
    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except ValueError:
        logger.info("request_body_not_json", extra={"body_bytes": len(body)})
        return {}


@app.api_route(
    GENERATE_PATH,
    methods=ROUTED_METHODS,
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def post_generate(request: Request):
    if request.method not in ALLOWED_METHODS:
        logger.info("method_not_allowed", extra={"method": request.method})
        return JSONResponse(
            status_code=405,
            content={"error": f"Method {request.method} Not Allowed"},
            headers={"Allow": ", ".join(ALLOWED_METHODS)},
        )
    payload = await _read_json_body(request)
    return await generate_resume(payload)
