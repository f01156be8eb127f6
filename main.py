"""
bloglist — FastAPI Application Entry Point

Registers the blog router, applies middleware, and serves the API.
"""

import logging
import contextlib
import time
import traceback
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from bloglist.config import Settings, settings
from bloglist.dependencies import build_blog_store
from bloglist.domain.errors import BlogError
from bloglist.ports.blog_port import BlogPort
from bloglist.routers import blog

# ── Logging ───────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
)
logger = logging.getLogger(__name__)


# ── App factory ───────────────────────────────────────────────
def create_app(store: BlogPort | None = None, config: Settings = settings) -> FastAPI:
    """
    Build the application around a blog store.

    When `store` is omitted one is built from configuration. Either way
    it is connected on startup and closed on shutdown.
    """

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        blog_store = store if store is not None else build_blog_store(config)
        await blog_store.connect()
        app.state.blog_store = blog_store
        logger.info(f"🚀 {config.app_name} is starting up ({type(blog_store).__name__})")
        yield
        # Shutdown
        await blog_store.close()
        logger.info(f"🛑 {config.app_name} is shutting down")

    app = FastAPI(
        title=config.app_name,
        description="Blog list API — list, create, update and delete blog posts.",
        version="0.1.0",
        debug=config.debug,
        lifespan=lifespan,
    )

    # ── CORS ──────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Request Logging ───────────────────────────────────────
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} → {response.status_code} "
            f"({elapsed_ms:.1f} ms)"
        )
        return response

    # ── Exception Handlers ────────────────────────────────────
    @app.exception_handler(BlogError)
    async def blog_error_handler(request: Request, exc: BlogError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    # Body validation failures are client errors: 400, not FastAPI's 422
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    # Ensures ALL unhandled errors return proper JSON
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: "
            f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
        )
        return JSONResponse(
            status_code=500,
            content={"detail": f"Internal server error: {type(exc).__name__}"},
        )

    # ── Routers ───────────────────────────────────────────────
    app.include_router(blog.router)

    # ── Health Check ──────────────────────────────────────────
    @app.get("/", tags=["Health"])
    async def health_check():
        return {"status": "ok", "service": config.app_name}

    return app


app = create_app()
