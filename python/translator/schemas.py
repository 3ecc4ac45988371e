from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# -------------------------------------------------------------------------
# [Wire Schemas]
# JSON 필드는 camelCase (sourceLang, translatedText ...), 파이썬 속성은 snake_case
# -------------------------------------------------------------------------

class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class TranslationRequest(WireModel):
    """Client -> Proxy: 번역 요청 (제출마다 새로 생성)"""
    text: str
    source_lang: str
    target_lang: str


class TranslationResult(WireModel):
    """Proxy -> Client: 성공 응답"""
    original_text: str
    translated_text: str
    source_lang: str
    target_lang: str


class ErrorResponse(WireModel):
    """Proxy -> Client: 실패 응답"""
    error: str
    details: Optional[Any] = Field(default=None)
