"""
Client-side interaction state machine for one translation form.

Idle -> Validating -> Pending -> Succeeded | Failed. Every submit and every
swap bumps a generation counter; a response tagged with an older generation
is discarded instead of being applied to state it no longer belongs to.
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from translator.languages import LanguageRegistry, registry as default_registry
from translator.schemas import TranslationRequest, TranslationResult

logger = logging.getLogger("Translator.Controller")

MSG_EMPTY_TEXT = "Please enter text to translate"
MSG_NO_TARGET = "Please select a target language"
MSG_UNSUPPORTED_TARGET = "Unsupported target language: {code}"
MSG_FAILED = "Failed to translate. Please try again."


class TargetLanguageInputMode(str, Enum):
    CONSTRAINED = "constrained"   # registry code only
    FREE_TEXT = "free_text"       # any label, e.g. "Spanish"


class RenderState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    FAILED = "failed"
    SUCCEEDED = "succeeded"


@dataclass(frozen=True)
class InteractionState:
    text: str = ""
    source_lang: str = "en"
    target_lang: str = ""
    translation: str = ""
    is_loading: bool = False
    error: str = ""
    generation: int = 0


class TranslationController:
    def __init__(self, client,
                 registry: LanguageRegistry = default_registry,
                 target_language_input_mode: TargetLanguageInputMode = TargetLanguageInputMode.CONSTRAINED,
                 require_target_language: bool = True,
                 source_lang: str = "en",
                 target_lang: str = ""):
        self.client = client
        self.registry = registry
        self.target_language_input_mode = TargetLanguageInputMode(target_language_input_mode)
        self.require_target_language = require_target_language
        self.state = InteractionState(source_lang=source_lang, target_lang=target_lang)
        # generation of the most recently dispatched request
        self._dispatched: Optional[int] = None

    @property
    def render_state(self) -> RenderState:
        if self.state.is_loading:
            return RenderState.LOADING
        if self.state.error:
            return RenderState.FAILED
        if self.state.translation:
            return RenderState.SUCCEEDED
        return RenderState.IDLE

    # --- edit ---
    def edit(self, text: Optional[str] = None, source_lang: Optional[str] = None,
             target_lang: Optional[str] = None) -> None:
        """Field updates never clear the visible result or error."""
        changes = {}
        if text is not None:
            changes["text"] = text
        if source_lang is not None:
            changes["source_lang"] = source_lang
        if target_lang is not None:
            changes["target_lang"] = target_lang
        self.state = replace(self.state, **changes)

    # --- submit ---
    def validate(self) -> Optional[str]:
        if not self.state.text.strip():
            return MSG_EMPTY_TEXT

        target = self.state.target_lang.strip()
        if not target:
            return MSG_NO_TARGET if self.require_target_language else None

        if (self.target_language_input_mode == TargetLanguageInputMode.CONSTRAINED
                and not self.registry.is_supported(target)):
            return MSG_UNSUPPORTED_TARGET.format(code=target)
        return None

    def begin_submit(self) -> Optional[Tuple[int, TranslationRequest]]:
        """
        Validating -> Pending (returns the tagged request) or -> Failed (returns None).
        Does not guard against an already pending request; the form does that.
        """
        generation = self.state.generation + 1
        problem = self.validate()
        if problem:
            self.state = replace(self.state, generation=generation, error=problem,
                                 translation="", is_loading=False)
            return None

        self.state = replace(self.state, generation=generation, error="",
                             translation="", is_loading=True)
        self._dispatched = generation
        request = TranslationRequest(
            text=self.state.text,
            source_lang=self.state.source_lang,
            target_lang=self.state.target_lang,
        )
        return generation, request

    async def submit(self) -> bool:
        pending = self.begin_submit()
        if pending is None:
            return False

        generation, request = pending
        try:
            result = await self.client.translate(request)
        except Exception as e:
            self.on_failure(str(e) or type(e).__name__, generation=generation)
            return False
        return self.on_response(result, generation=generation)

    # --- completion ---
    def _is_stale(self, generation: Optional[int]) -> bool:
        if generation is None or generation == self.state.generation:
            return False
        if generation == self._dispatched:
            # the only outstanding request finished against a newer state
            self.state = replace(self.state, is_loading=False)
        logger.info(f"Discarding stale response (generation {generation}, current {self.state.generation})")
        return True

    def on_response(self, result: TranslationResult, generation: Optional[int] = None) -> bool:
        if self._is_stale(generation):
            return False
        self.state = replace(self.state, translation=result.translated_text, is_loading=False, error="")
        return True

    def on_failure(self, reason: str, generation: Optional[int] = None) -> bool:
        if self._is_stale(generation):
            return False
        logger.error(f"Translation request failed: {reason}")
        self.state = replace(self.state, error=MSG_FAILED, is_loading=False, translation="")
        return True

    # --- swap ---
    def swap(self) -> None:
        """Reverse direction; the previous output becomes the new input."""
        s = self.state
        self.state = replace(
            s,
            source_lang=s.target_lang,
            target_lang=s.source_lang,
            text=s.translation,
            translation="",
            generation=s.generation + 1,
        )
