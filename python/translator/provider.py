import json
import logging
from typing import Any, Optional

import httpx

from translator.config import ProviderConfig
from translator.errors import ProviderCallFailed

logger = logging.getLogger("Translator.Provider")

# 고정 정책값 (사용자 설정 불가)
MAX_TOKENS = 300
TEMPERATURE = 0.3
CREDENTIAL_HEADER = "api-key"

TRANSLATION_PROMPT = """Translate the following text from {source_lang} to {target_lang}:

"{text}"

Only provide the translated text without any additional commentary or explanation."""


def build_url(config: ProviderConfig) -> str:
    endpoint = config.endpoint.rstrip("/")
    return (f"{endpoint}/openai/deployments/{config.deployment_name}"
            f"/chat/completions?api-version={config.api_version}")


def build_payload(config: ProviderConfig, text: str, source_lang: str, target_lang: str) -> dict:
    prompt = TRANSLATION_PROMPT.format(source_lang=source_lang, target_lang=target_lang, text=text)
    return {
        "messages": [{"role": "user", "content": prompt}],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
        "model": config.deployment_name,
    }


def build_headers(config: ProviderConfig) -> dict:
    return {"Content-Type": "application/json", CREDENTIAL_HEADER: config.api_key}


def extract_translation(data: Any) -> str:
    """
    choices[0].message.content 를 trim 하여 반환.
    content 가 비어있거나 null 이면 "" (정상 결과로 취급).
    choices / message 자체가 없으면 ProviderCallFailed.
    """
    try:
        message = data["choices"][0]["message"]
    except (KeyError, IndexError, TypeError):
        raise ProviderCallFailed("Malformed provider payload", details=data)

    if not isinstance(message, dict):
        raise ProviderCallFailed("Malformed provider payload", details=data)

    content = message.get("content")
    if not isinstance(content, str):
        return ""
    return content.strip()


def redact(value: Any, secret: Optional[str]) -> Any:
    """진단 payload 에서 자격증명 문자열 제거"""
    if not secret:
        return value
    if isinstance(value, str):
        return value.replace(secret, "***")
    if isinstance(value, dict):
        return {k: redact(v, secret) for k, v in value.items()}
    if isinstance(value, list):
        return [redact(v, secret) for v in value]
    return value


def _response_details(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except (json.JSONDecodeError, ValueError):
        return resp.text


class AzureOpenAIProvider:
    """
    Azure OpenAI chat-completions 호출 어댑터.
    요청 1건당 외부 호출 1회, 별도 timeout 은 두지 않음 (httpx 기본값).
    """
    def __init__(self, config: ProviderConfig, client_factory=None):
        self.config = config
        self.client_factory = client_factory

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        url = build_url(self.config)
        payload = build_payload(self.config, text, source_lang, target_lang)
        headers = build_headers(self.config)

        logger.info(f"[*] Provider Request: {source_lang} -> {target_lang} ({len(text)} chars)")

        factory = self.client_factory or httpx.AsyncClient
        async with factory() as client:
            try:
                resp = await client.post(url, json=payload, headers=headers)
            except httpx.HTTPError as e:
                details = redact(str(e) or type(e).__name__, self.config.api_key)
                logger.error(f"[*] Provider Transport Error: {details}")
                raise ProviderCallFailed("Provider transport error", details=details)

        if not 200 <= resp.status_code < 300:
            details = redact(_response_details(resp), self.config.api_key)
            logger.error(f"[*] Provider Error {resp.status_code}: {details}")
            raise ProviderCallFailed(f"Provider returned {resp.status_code}", details=details,
                                     status=resp.status_code)

        try:
            data = resp.json()
        except (json.JSONDecodeError, ValueError):
            details = redact(resp.text, self.config.api_key)
            logger.error(f"[*] Provider returned non-JSON body: {details[:200]}")
            raise ProviderCallFailed("Provider returned non-JSON body", details=details,
                                     status=resp.status_code)

        try:
            return extract_translation(data)
        except ProviderCallFailed as e:
            e.details = redact(e.details, self.config.api_key)
            logger.error(f"[*] Malformed Provider Payload: {e.details}")
            raise
