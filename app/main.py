import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes_check import router as check_router
from app.core.logging import setup_logging
from app.core.settings import get_settings
from app.domain.contracts import HealthResponse
from app.services.check_service import get_check_service

setup_logging(get_settings().LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 启动时加载参考语料，配置有误直接失败
    service = get_check_service()
    logger.info("similarity check service ready, %d reference documents", len(service.corpus))
    yield


app = FastAPI(title="Similarity Check API", version="v1", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ALLOW_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(check_router)


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    # 统一成 {"error": ...}
    detail = exc.detail
    if exc.status_code == 405 and request.url.path == "/check":
        detail = "Only POST method is allowed"
    return JSONResponse(status_code=exc.status_code, content={"error": str(detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def server_error(request: Request, exc: Exception):
    # 路由 try 之外的失败（如语料依赖构建失败）
    logger.error("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": f"Server error: {exc}"})


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(ok=True, references=len(get_check_service().corpus))


if __name__ == "__main__":
    import uvicorn

    s = get_settings()
    uvicorn.run(app, host=s.HOST, port=s.PORT)
