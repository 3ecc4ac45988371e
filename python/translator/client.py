import json
import logging

import httpx
from pydantic import ValidationError

from translator.schemas import TranslationRequest, TranslationResult

logger = logging.getLogger("Translator.Client")

DEFAULT_API_URL = "http://127.0.0.1:3000"
TRANSLATE_PATH = "/api/translate"


class TranslationClientError(Exception):
    """Any non-success outcome of a proxy call; the kind is not inspected."""
    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)


class TranslationClient:
    """Controller -> Proxy HTTP transport"""
    def __init__(self, base_url: str = DEFAULT_API_URL, client_factory=None):
        self.base_url = base_url.rstrip("/")
        self.client_factory = client_factory

    @property
    def translate_url(self) -> str:
        return f"{self.base_url}{TRANSLATE_PATH}"

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        factory = self.client_factory or httpx.AsyncClient
        async with factory() as client:
            try:
                resp = await client.post(
                    self.translate_url,
                    json=request.to_wire(),
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as e:
                raise TranslationClientError(f"Proxy unreachable: {e}")

        if not 200 <= resp.status_code < 300:
            raise TranslationClientError("Translation failed", status_code=resp.status_code)

        try:
            return TranslationResult.model_validate(resp.json())
        except (json.JSONDecodeError, ValueError, ValidationError) as e:
            raise TranslationClientError(f"Malformed proxy response: {e}", status_code=resp.status_code)
