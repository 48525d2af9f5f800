"""
HTTP API

FastAPI application serving the resume, job analysis, PDF generation and
section ordering to the front-end. Handlers are synchronous, so FastAPI runs
each request in its worker thread pool.
"""

import os
import threading
from pathlib import Path
from typing import Callable, Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from tailor import __version__
from tailor.api.cache import ResumeCache
from tailor.api.logger import _log_info, log_request_error
from tailor.api.schemas import GenerateRequest, JobAnalysisRequest, PartialSectionOrderRequest
from tailor.api.transform import transform_resume
from tailor.contexts.content import (
    apply_section_order,
    load_order,
    merge_order,
    order_path_for,
    save_order,
    select_by_ids,
)
from tailor.contexts.rendering import compile_document
from tailor.contexts.targeting import analyze_job
from tailor.contexts.templating import DEFAULT_TEMPLATE, TemplateRegistry, generate_latex
from tailor.exceptions import InvalidRequestError, TailorError, TemplateNotFoundError
from tailor.utils.llm import LLMProvider, get_provider

load_dotenv()
DEFAULT_HOST = os.getenv("TAILOR_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("TAILOR_PORT", "8080"))

# Errors caused by the request itself; everything else is a server error
CLIENT_ERRORS = (InvalidRequestError, TemplateNotFoundError)

router = APIRouter(prefix="/api")


@router.get("/health")
def health():
    return {"status": "ok"}


def _current_order(request: Request, resume):
    return load_order(request.app.state.order_path, resume)


@router.get("/resume")
def get_resume(request: Request):
    resume = request.app.state.cache.get()
    return transform_resume(resume, _current_order(request, resume))


@router.post("/resume/reload")
def reload_resume(request: Request):
    resume = request.app.state.cache.get(force_reload=True)
    return transform_resume(resume, _current_order(request, resume))


@router.post("/job/analyze")
def analyze(body: JobAnalysisRequest, request: Request):
    if not body.description:
        raise InvalidRequestError("description is required")

    resume = request.app.state.cache.get()
    provider = request.app.state.provider_factory()
    analysis = analyze_job(resume, body.job_title, body.company, body.description, provider=provider)
    return analysis.to_dict()


@router.post("/generate")
def generate(body: GenerateRequest, request: Request):
    state = request.app.state
    resume = state.cache.get()
    resume = apply_section_order(resume, _current_order(request, resume))

    selection = select_by_ids(body.selected_ids())
    latex = generate_latex(
        resume,
        selection,
        template_name=body.template or DEFAULT_TEMPLATE,
        registry=state.registry,
    )
    pdf_bytes = state.compiler(latex)

    _log_info(f"Generated PDF ({len(pdf_bytes)} bytes)")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=resume.pdf"},
    )


@router.get("/order")
def get_order(request: Request):
    resume = request.app.state.cache.get()
    return _current_order(request, resume).to_dict()


@router.put("/order")
def update_order(body: PartialSectionOrderRequest, request: Request):
    state = request.app.state
    resume = state.cache.get()
    with state.order_lock:
        merged = merge_order(_current_order(request, resume), body.model_dump(exclude_none=True))
        save_order(state.order_path, merged)
    return merged.to_dict()


def _error_response(request: Request, status_code: int, exc: Exception, message: str) -> JSONResponse:
    log_request_error(request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map every handler error to a JSON body of the form {"error": "<message>"}."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return _error_response(request, 400, exc, "invalid request body")

    @app.exception_handler(TailorError)
    async def handle_tailor_error(request: Request, exc: TailorError):
        status_code = 400 if isinstance(exc, CLIENT_ERRORS) else 500
        return _error_response(request, status_code, exc, str(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        return _error_response(request, 500, exc, str(exc))


def create_app(
    resume_path: Path,
    order_path: Optional[Path] = None,
    provider_factory: Callable[[], LLMProvider] = get_provider,
    compiler: Callable[[str], bytes] = compile_document,
    registry: Optional[TemplateRegistry] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        resume_path: Resume source file
        order_path: Section order file (default: order.yaml beside the resume)
        provider_factory: Returns the LLM provider for job analysis
        compiler: Turns LaTeX source into PDF bytes
        registry: Template registry (default: bundled templates)
    """
    resume_path = Path(resume_path)

    app = FastAPI(title="tailor", version=__version__)
    app.state.cache = ResumeCache(resume_path)
    app.state.order_path = order_path_for(resume_path, order_path)
    app.state.order_lock = threading.Lock()
    app.state.provider_factory = provider_factory
    app.state.compiler = compiler
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)

    return app


def run_server(
    resume_path: Path,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    order_path: Optional[Path] = None,
) -> None:
    """Serve the API with uvicorn until interrupted."""
    app = create_app(resume_path, order_path=order_path)
    _log_info(f"Serving {resume_path} at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="info")
