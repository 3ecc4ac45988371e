import os
import json
import logging
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger("Translator.Config")

DEFAULT_API_VERSION = "2024-08-01-preview"
DEFAULT_CONFIG_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../config/config.json'))

# 환경변수 키 -> ProviderConfig 필드
ENV_KEYS = {
    "endpoint": "AZURE_OPENAI_ENDPOINT",
    "api_key": "AZURE_OPENAI_API_KEY",
    "deployment_name": "AZURE_OPENAI_DEPLOYMENT_NAME",
    "api_version": "AZURE_OPENAI_API_VERSION",
}

REQUIRED_FIELDS = ("endpoint", "api_key", "deployment_name")


class ProviderConfig(BaseModel):
    """
    Azure OpenAI 접속 정보.
    프로세스 시작 시 한 번 생성되어 ProxyService에 참조로 전달됨 (이후 변경 불가).
    """
    model_config = ConfigDict(frozen=True)

    provider_name: str = "Azure OpenAI"
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    deployment_name: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION

    def missing_fields(self) -> Tuple[str, ...]:
        return tuple(f for f in REQUIRED_FIELDS if not getattr(self, f))

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def __repr__(self) -> str:
        # api_key 노출 방지
        key = "***" if self.api_key else None
        return (f"ProviderConfig(endpoint={self.endpoint!r}, api_key={key!r}, "
                f"deployment_name={self.deployment_name!r}, api_version={self.api_version!r})")

    __str__ = __repr__


def _read_config_file(config_path: str) -> dict:
    """config.json 의 system_settings.azure_openai 섹션 (없으면 빈 dict)"""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
        return {}
    section = data.get('system_settings', {}).get('azure_openai', {})
    return section if isinstance(section, dict) else {}


def load_provider_config(config_path: Optional[str] = None, use_dotenv: bool = True) -> ProviderConfig:
    """
    설정 우선순위: 환경변수(.env 포함) > config.json
    """
    if use_dotenv:
        load_dotenv()

    values = {}
    file_values = _read_config_file(config_path or DEFAULT_CONFIG_PATH)
    for field in ENV_KEYS:
        if file_values.get(field):
            values[field] = file_values[field]

    for field, env_key in ENV_KEYS.items():
        env_value = os.getenv(env_key)
        if env_value:
            values[field] = env_value

    config = ProviderConfig(**values)
    if config.is_complete:
        logger.info(f"Provider configured: deployment={config.deployment_name}, api_version={config.api_version}")
    else:
        logger.warning(f"Provider configuration incomplete, missing: {', '.join(config.missing_fields())}")
    return config
