import json
import logging
from typing import Optional
from urllib.parse import unquote_plus

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from app.domain.contracts import CheckRequest, CheckResponse, ErrorResponse
from app.services.check_service import CheckService, get_check_service

router = APIRouter(tags=["check"])
logger = logging.getLogger(__name__)

PERCENT_DECIMALS = 1


def parse_body(body: str, content_type: str = "") -> Optional[str]:
    """JSON {"text": ...} → 表单 text=... (URL 解码) → 原始文本。"""
    if content_type.lower().startswith("application/json"):
        try:
            return CheckRequest.model_validate(json.loads(body or "null")).text
        except (ValueError, ValidationError):
            raise HTTPException(status_code=400, detail="Invalid JSON body")
    if body.startswith("text="):
        return unquote_plus(body[len("text="):])
    return body


@router.post(
    "/check",
    response_model=CheckResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def check(request: Request, service: CheckService = Depends(get_check_service)):
    raw = await request.body()
    text = parse_body(raw.decode("utf-8", errors="replace"), request.headers.get("content-type", ""))
    if text is None or not text.strip():
        raise HTTPException(status_code=400, detail="No text content provided")

    try:
        verdict = service.score(text)
    except Exception as e:
        logger.exception("check failed")
        return JSONResponse(status_code=500, content={"error": f"Server error: {e}"})

    # 只在这里做一位小数的四舍五入，引擎内部保持全精度
    return CheckResponse(percentage=round(verdict.percentage, PERCENT_DECIMALS), message=verdict.message)


@router.options("/check")
async def check_preflight():
    # 不带 Origin 的 OPTIONS 不会被 CORS 中间件拦截，这里兜底返回 204
    return Response(status_code=204)
