import logging

from guest_list.guests.dtos import Language
from guest_list.i18n.catalog import CATALOGS, MESSAGES_EN

logger = logging.getLogger(__name__)


class Translator:
    """Looks up display strings by key, falling back to English and then the key itself."""

    def __init__(self, language: Language = Language.EN):
        self.language = language
        self._messages = CATALOGS.get(language, MESSAGES_EN)

    @classmethod
    def for_code(cls, code: str) -> "Translator":
        """Build a translator from a language code such as "nl"; unknown codes use English."""
        try:
            language = Language(code.lower())
        except ValueError:
            logger.warning(f"Unsupported language '{code}', using English")
            language = Language.EN
        return cls(language)

    def t(self, key: str) -> str:
        if key in self._messages:
            return self._messages[key]
        return MESSAGES_EN.get(key, key)

    __call__ = t
