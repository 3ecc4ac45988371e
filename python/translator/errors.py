"""
Closed set of proxy-side failures.

Each variant knows its HTTP status and the body the client receives; the
API layer turns them into responses in one place.
"""
from typing import Any, Optional, Tuple

from translator.schemas import ErrorResponse


class TranslationError(Exception):
    status_code = 500
    public_message = "Translation failed"

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.public_message)


class InvalidInput(TranslationError):
    """Empty text or missing language selection"""
    status_code = 400
    public_message = "Missing required parameters"

    def __init__(self, missing: Tuple[str, ...] = ()):
        self.missing = tuple(missing)
        super().__init__(f"Missing required parameters: {', '.join(self.missing) or 'body'}")


class MisconfiguredProvider(TranslationError):
    """Provider endpoint/credential/deployment not configured"""
    status_code = 500

    def __init__(self, provider: str, missing: Tuple[str, ...]):
        self.provider = provider
        self.missing = tuple(missing)
        super().__init__(f"{provider} configuration incomplete: {', '.join(self.missing)}")

    @property
    def public_message(self) -> str:
        return f"Missing {self.provider} configuration"

    def to_response(self) -> ErrorResponse:
        # 누락 필드명은 서버 로그에만 남김
        return ErrorResponse(error=self.public_message)


class ProviderCallFailed(TranslationError):
    """Transport error, non-2xx, or malformed provider payload"""
    status_code = 500
    public_message = "Translation failed"

    def __init__(self, reason: str, details: Optional[Any] = None, status: Optional[int] = None):
        self.reason = reason
        self.details = details if details is not None else reason
        self.status = status
        super().__init__(reason)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.public_message, details=self.details)
