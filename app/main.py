from typing import Optional
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from timing_asgi import TimingMiddleware, TimingClient  # type: ignore
from timing_asgi.integrations import StarletteScopeToName  # type: ignore

from app.core import config
from app.core.database.engine import init_db
from app.features.permissions.graph import get_permission_graph
from app.features.permissions.routes import router as permission_router
from app.features.roles.routes import router as role_router
from app.features.users.routes import router as user_router
from app.features.users.dependencies import get_authorization_header
from app.utils import get_logger


log = get_logger(__name__)
log.info("Initializing access control server")
app = FastAPI(
    title="ERP Tools Access Control",
    description="Role and permission management for the warehouse ERP tools",
    version="0.1.0",
    docs_url="/docs" if config.ENABLE_DOCS else None,
    redoc_url="/redoc" if config.ENABLE_DOCS else None,
    openapi_url="/openapi.json" if config.ENABLE_DOCS else None
)


def rate_limit_exceeded_handler(_request: Request, _exc: RateLimitExceeded) -> Response:
    return JSONResponse({"error": "You are going too fast"}, status_code=429)


def install_rate_limit(target: FastAPI, limit: Optional[str]) -> Limiter:
    """Attach a limiter bucketed per bearer token; ``limit`` applies to every route when set."""
    limiter = Limiter(key_func=get_authorization_header, default_limits=[limit] if limit else [])
    target.state.limiter = limiter
    target.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    if limit:
        log.warning("Rate limiting requests to %s per token", limit)
        target.add_middleware(SlowAPIMiddleware)
    return limiter


limiter = install_rate_limit(app, config.RATE_LIMIT)


class PrintTimings(TimingClient):
    def timing(self, metric_name, timing, tags):
        log.debug(dict(route=metric_name.removeprefix("main.app.features."), timing=timing, tags=tags))


app.add_middleware(TimingMiddleware, client=PrintTimings(), metric_namer=StarletteScopeToName("main", app))

if config.ENABLE_DOCS:
    log.warning("Docs enabled")
if config.ALLOW_ORIGIN:
    log.warning("Setting allow origin to %s", config.ALLOW_ORIGIN)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.ALLOW_ORIGIN],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )


def _error_key(loc) -> str:
    # ("body", 0, "id") -> "0.id", ("query", "sort_key") -> "sort_key"
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "__root__")]
    return ".".join(parts) or "root"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    errors = dict()
    for error in exc.errors():
        if "loc" not in error or "msg" not in error:
            continue
        errors[_error_key(error["loc"])] = error["msg"]
    log.info("Request validation error %s", errors)
    return JSONResponse(status_code=400, content=jsonable_encoder(errors))


@app.on_event("startup")
async def startup():
    """Create tables and build the permission graph before serving requests."""
    await init_db()
    graph = get_permission_graph()
    log.info("Database ready, permission graph has %d nodes", len(graph.nodes))


@app.get("/")
async def root():
    """Service information."""
    graph = get_permission_graph()
    return {
        "message": "ERP Tools Access Control API",
        "version": app.version,
        "docs": app.docs_url,
        "admin_role": config.ADMIN_ROLE_ID,
        "permission_graph": {
            "nodes": len(graph.nodes),
            "source": config.PERMISSION_TREE_FILE or "built-in",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(user_router, prefix="/users")
app.include_router(role_router, prefix="/roles", tags=["roles"])
app.include_router(permission_router, prefix="/permissions", tags=["permissions"])
