import logging
from typing import List, Tuple

from translator.controller import RenderState, TargetLanguageInputMode, TranslationController

logger = logging.getLogger("Translator.Form")

TITLE = "Translator"
BUTTON_LABEL = "Translate"
BUTTON_BUSY_LABEL = "Translating..."
OUTPUT_PLACEHOLDER = "Translation will appear here"
SPINNER = "..."
SOURCE_PLACEHOLDER = "Source Language"
TARGET_PLACEHOLDER = "Enter Language (e.g. Spanish)"

CATEGORY_TITLES = {
    "popular": "Popular Languages",
    "other": "Other Languages",
}


class TranslationForm:
    """
    Render surface for one controller.
    Owns the submit affordance: while disabled, clicks never reach the controller.
    """
    def __init__(self, controller: TranslationController):
        self.controller = controller

    @property
    def state(self):
        return self.controller.state

    @property
    def submit_enabled(self) -> bool:
        s = self.state
        if s.is_loading or not s.text:
            return False
        if self.controller.require_target_language and not s.target_lang:
            return False
        return True

    # --- user actions ---
    def type_text(self, text: str):
        self.controller.edit(text=text)

    def select_source(self, code: str):
        self.controller.edit(source_lang=code)

    def enter_target(self, value: str):
        self.controller.edit(target_lang=value)

    def click_swap(self):
        self.controller.swap()

    async def click_translate(self) -> bool:
        """False when the button is disabled and the click was ignored."""
        if not self.submit_enabled:
            logger.debug("Translate button disabled; click ignored")
            return False
        await self.controller.submit()
        return True

    # --- rendering ---
    def button_label(self) -> str:
        return BUTTON_BUSY_LABEL if self.state.is_loading else BUTTON_LABEL

    def output_panel(self) -> str:
        render_state = self.controller.render_state
        if render_state == RenderState.LOADING:
            return SPINNER
        if render_state == RenderState.FAILED:
            return self.state.error
        if render_state == RenderState.SUCCEEDED:
            return self.state.translation
        return OUTPUT_PLACEHOLDER

    def source_label(self) -> str:
        code = self.state.source_lang
        return self.controller.registry.display_name(code) if code else SOURCE_PLACEHOLDER

    def target_label(self) -> str:
        code = self.state.target_lang
        if not code:
            return TARGET_PLACEHOLDER
        if self.controller.target_language_input_mode == TargetLanguageInputMode.FREE_TEXT:
            return code
        return self.controller.registry.display_name(code)

    def language_options(self) -> List[Tuple[str, List[Tuple[str, str]]]]:
        """(category title, [(code, name), ...]) in registry order"""
        return [
            (CATEGORY_TITLES.get(category, category.title()), [(lang.code, lang.name) for lang in langs])
            for category, langs in self.controller.registry.categories()
        ]

    def render(self) -> str:
        lines = [
            TITLE,
            f"{self.source_label()}  <->  {self.target_label()}",
            f"Input : {self.state.text}",
            f"Output: {self.output_panel()}",
            f"[{self.button_label()}]" + ("" if self.submit_enabled else " (disabled)"),
        ]
        return "\n".join(lines)
