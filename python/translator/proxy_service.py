import logging
from typing import Any

from translator.config import ProviderConfig
from translator.errors import InvalidInput, MisconfiguredProvider
from translator.provider import AzureOpenAIProvider
from translator.schemas import TranslationResult

logger = logging.getLogger("Translator.Proxy")

REQUIRED_PARAMS = ("text", "sourceLang", "targetLang")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class TranslationProxyService:
    """
    Stateless handler: validate -> config check -> provider call -> normalize.
    공유 상태는 읽기 전용 ProviderConfig 뿐이므로 동시 요청에 안전함.
    """
    def __init__(self, config: ProviderConfig, provider=None):
        self.config = config
        self.provider = provider or AzureOpenAIProvider(config)

    def validate(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            raise InvalidInput()
        missing = tuple(k for k in REQUIRED_PARAMS if _is_blank(payload.get(k)))
        if missing:
            raise InvalidInput(missing)

    def check_config(self) -> None:
        missing = self.config.missing_fields()
        if missing:
            raise MisconfiguredProvider(self.config.provider_name, missing)

    async def handle(self, payload: Any) -> TranslationResult:
        self.validate(payload)
        self.check_config()

        text = payload["text"]
        source_lang = payload["sourceLang"]
        target_lang = payload["targetLang"]

        translated = await self.provider.translate(text, source_lang, target_lang)
        if not translated:
            logger.warning(f"[*] Empty translation returned for {source_lang} -> {target_lang}")

        return TranslationResult(
            original_text=text,
            translated_text=translated,
            source_lang=source_lang,
            target_lang=target_lang,
        )
