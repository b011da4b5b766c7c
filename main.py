from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.middleware.trustedhost import TrustedHostMiddleware
from dotenv import load_dotenv
from api.cover import router as cover_router
from api.healthcheck import router as healthcheck_router
from utils.logger import logger
import os
import secrets
import time

load_dotenv()
# env
API_KEY = os.getenv("API_KEY")
CORS_ALLOW_ORIGINS = [o for o in os.getenv("CORS_ALLOW_ORIGINS", "").split(",") if o]
ALLOWED_HOSTS = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h] or ["*"]
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", "0"))  # 0 = no limit

API_KEY_HEADER = "x-api-key"
HEALTH_PATH = "/api/health/check"

# Paths served without an API key
PUBLIC_PATHS = {"/openapi.json", "/redoc", "/docs", HEALTH_PATH}
PUBLIC_PREFIXES = ("/docs/",)

app = FastAPI(title="Conflict Cover API", version="0.1.0")

if os.getenv("ENABLE_CORS") == "true":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_middleware(TrustedHostMiddleware, allowed_hosts=ALLOWED_HOSTS)


def is_public(path: str) -> bool:
    return path in PUBLIC_PATHS or path.startswith(PUBLIC_PREFIXES)


def body_too_large(request: Request) -> bool:
    if MAX_BODY_BYTES <= 0:
        return False
    length = request.headers.get("content-length")
    return bool(length and length.isdigit() and int(length) > MAX_BODY_BYTES)


def authorized(request: Request) -> bool:
    if not API_KEY:
        logger.warning("API_KEY not set; API key auth is DISABLED (dev mode).")
        return True
    client_key = request.headers.get(API_KEY_HEADER)
    return bool(client_key) and secrets.compare_digest(str(client_key), str(API_KEY))


# request guard: size limit, then API key, then timing
@app.middleware("http")
async def guard(request: Request, call_next):
    if body_too_large(request):
        return JSONResponse(status_code=413, content={"detail": "Payload too large"})

    if request.method != "OPTIONS" and not is_public(request.url.path) and not authorized(request):
        return JSONResponse(status_code=401, content={"detail": "Unauthorized"})

    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response


# openapi with the api key header as security scheme
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description="Compress pairwise conflicts into clique, star, bipartite and odd cycle constraints.",
        routes=app.routes,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})["ApiKeyAuth"] = {
        "type": "apiKey",
        "in": "header",
        "name": API_KEY_HEADER,
        "description": "Enter your API key",
    }

    for path, methods in schema.get("paths", {}).items():
        for op in methods.values():
            # public paths get no lock in Swagger
            op["security"] = [] if is_public(path) else [{"ApiKeyAuth": []}]

    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi

# Register routers
app.include_router(cover_router, prefix="/api")
app.include_router(healthcheck_router, prefix="/api")
