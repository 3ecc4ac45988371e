from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

# -------------------------------------------------------------------------
# [Language Registry]
# 정적 언어 코드 <-> 표시 이름 테이블. 프로세스 시작 시 한 번만 생성됨.
# -------------------------------------------------------------------------

class Language(BaseModel):
    """지원 언어 한 항목 (code, name)"""
    model_config = ConfigDict(frozen=True)

    code: str
    name: str


class LanguageRegistry:
    """
    Categorized lookup table.
    Lookup miss returns None; rendering the raw code is the caller's job.
    """
    def __init__(self, categories: Dict[str, List[Tuple[str, str]]]):
        grouped = {}
        flat = {}
        for category, entries in categories.items():
            languages = tuple(Language(code=code, name=name) for code, name in entries)
            for lang in languages:
                if lang.code in flat:
                    raise ValueError(f"Duplicate language code: {lang.code}")
                flat[lang.code] = lang.name
            grouped[category] = languages

        self._categories: Mapping[str, Tuple[Language, ...]] = MappingProxyType(grouped)
        self._names: Mapping[str, str] = MappingProxyType(flat)

    def lookup(self, code: str) -> Optional[str]:
        return self._names.get(code)

    def list_all(self) -> Tuple[Language, ...]:
        """Category order preserved (popular first)"""
        return tuple(lang for langs in self._categories.values() for lang in langs)

    def categories(self) -> Tuple[Tuple[str, Tuple[Language, ...]], ...]:
        return tuple(self._categories.items())

    def is_supported(self, code: str) -> bool:
        return code in self._names

    def display_name(self, code: str) -> str:
        return self._names.get(code, code)

    def __contains__(self, code) -> bool:
        return code in self._names

    def __len__(self) -> int:
        return len(self._names)


LANGUAGE_CATEGORIES = {
    "popular": [
        ("en", "English"),
        ("es", "Spanish"),
        ("fr", "French"),
        ("de", "German"),
        ("zh", "Chinese"),
        ("ar", "Arabic"),
        ("ru", "Russian"),
    ],
    "other": [
        ("it", "Italian"),
        ("ja", "Japanese"),
        ("ko", "Korean"),
        ("pt", "Portuguese"),
        ("nl", "Dutch"),
        ("tr", "Turkish"),
        ("hi", "Hindi"),
        ("sv", "Swedish"),
    ],
}

# 전역 레지스트리 인스턴스 (읽기 전용)
registry = LanguageRegistry(LANGUAGE_CATEGORIES)
