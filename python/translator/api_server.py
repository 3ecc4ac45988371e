import json
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from translator.config import ProviderConfig, load_provider_config
from translator.errors import InvalidInput, MisconfiguredProvider, ProviderCallFailed, TranslationError
from translator.provider import CREDENTIAL_HEADER
from translator.proxy_service import TranslationProxyService

# 로거 설정
logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s - %(message)s')
logger = logging.getLogger("Translator.API")

ALLOWED_METHODS = ["POST", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", CREDENTIAL_HEADER]

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
    "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
}


def error_response(exc: TranslationError) -> JSONResponse:
    """에러 종류별 서버 로그 + 클라이언트 응답 생성"""
    if isinstance(exc, InvalidInput):
        logger.info(f"[*] Rejected request: {exc}")
    elif isinstance(exc, MisconfiguredProvider):
        logger.error(f"[*] Provider misconfigured: {exc}")
    elif isinstance(exc, ProviderCallFailed):
        logger.error(f"Detailed Translation Error: {exc.reason} -> {exc.details}")
    else:
        raise TypeError(f"Unhandled translation error variant: {type(exc).__name__}")

    return JSONResponse(status_code=exc.status_code, content=exc.to_response().to_wire())


def create_app(config: Optional[ProviderConfig] = None,
               service: Optional[TranslationProxyService] = None) -> FastAPI:
    if service is None:
        service = TranslationProxyService(config or load_provider_config())

    app = FastAPI(title="Translation Proxy")
    app.state.translation_service = service

    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        # preflight 는 translate_preflight 라우트가 고정 헤더로 응답
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response

    @app.exception_handler(TranslationError)
    async def translation_error_handler(request: Request, exc: TranslationError):
        return error_response(exc)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "translation_proxy"}

    @app.post("/api/translate")
    async def translate(request: Request):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise InvalidInput()

        result = await app.state.translation_service.handle(payload)
        return result.to_wire()

    @app.options("/api/translate")
    async def translate_preflight():
        return Response(status_code=200, headers=PREFLIGHT_HEADERS)

    return app


def run_api_server(host: str = "127.0.0.1", port: int = 3000, config: Optional[ProviderConfig] = None):
    app = create_app(config)
    uvicorn.run(app, host=host, port=port, log_level="info")
