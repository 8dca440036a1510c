#Create FASTAPI app
#Load Settings and logging
#MongoDB is connected lazily by the first request that needs it
#Every route answers OPTIONS and carries permissive CORS headers

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from app.config.settings import Settings
from app.routes import candidates_routes, health, history_routes, legacy_candidates_routes
from app.routes.responses import failure_for_path
from app.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

ROUTERS = (legacy_candidates_routes, candidates_routes, history_routes, health)

# Access-Control-Allow-Methods advertised per route prefix
CORS_METHODS = {module.router.prefix: module.ALLOWED_METHODS for module in ROUTERS if module.router.prefix}
DEFAULT_CORS_METHODS = health.ALLOWED_METHODS


def cors_headers(path: str) -> dict:
    methods = DEFAULT_CORS_METHODS
    for prefix, allowed in CORS_METHODS.items():
        if path == prefix or path.startswith(prefix + "/"):
            methods = allowed
            break
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": methods,
        "Access-Control-Allow-Headers": "Content-Type",
    }


# function create_app(): settings = Settings()  # from app.config.settings
def create_app() -> FastAPI:
    settings = Settings()  # from app.config.settings
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(title="Candidate Tracker API")

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        # Preflight: bare 200, no body
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(cors_headers(request.url.path))
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            logger.info(f"Method {request.method} not allowed on {request.url.path}")
            response = failure_for_path(request.url.path, 405, "Method not allowed")
        else:
            response = failure_for_path(request.url.path, exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
        return failure_for_path(request.url.path, 400, "Invalid request body")

    for module in ROUTERS:
        app.include_router(module.router)

    return app


app = create_app()


def main() -> None:
    settings = Settings()
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
