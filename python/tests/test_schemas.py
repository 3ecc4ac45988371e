"""
Tests for translator/schemas.py and translator/errors.py - wire shapes.
"""
from translator.errors import InvalidInput, MisconfiguredProvider, ProviderCallFailed
from translator.schemas import ErrorResponse, TranslationRequest, TranslationResult


class TestWireAliases:

    def test_request_uses_camel_case(self):
        req = TranslationRequest(text="Hi", source_lang="en", target_lang="de")
        assert req.to_wire() == {"text": "Hi", "sourceLang": "en", "targetLang": "de"}

    def test_result_parses_camel_case(self):
        result = TranslationResult.model_validate({
            "originalText": "Hello",
            "translatedText": "Hola",
            "sourceLang": "en",
            "targetLang": "es",
        })
        assert result.translated_text == "Hola"
        assert result.original_text == "Hello"

    def test_error_without_details_omits_field(self):
        assert ErrorResponse(error="Missing required parameters").to_wire() == {
            "error": "Missing required parameters"
        }


class TestErrorVariants:

    def test_invalid_input(self):
        err = InvalidInput(("text",))
        assert err.status_code == 400
        assert err.to_response().to_wire() == {"error": "Missing required parameters"}

    def test_misconfigured_provider_hides_field_names(self):
        err = MisconfiguredProvider("Azure OpenAI", ("api_key",))
        assert err.status_code == 500
        assert err.to_response().to_wire() == {"error": "Missing Azure OpenAI configuration"}
        assert "api_key" in str(err)

    def test_provider_call_failed_carries_details(self):
        err = ProviderCallFailed("Provider returned 429", details={"error": {"code": "429"}}, status=429)
        body = err.to_response().to_wire()
        assert body["error"] == "Translation failed"
        assert body["details"] == {"error": {"code": "429"}}

    def test_provider_call_failed_defaults_details_to_reason(self):
        err = ProviderCallFailed("Provider transport error")
        assert err.to_response().to_wire()["details"] == "Provider transport error"
