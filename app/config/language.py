from dataclasses import dataclass
from enum import Enum

from app.config.settings import Settings


class LanguageVariant(str, Enum):
    """Which engine variant (recognition model, dictionary) handles a file."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class LanguageSelector:
    """Maps declared language tags to engine variants and language codes.

    An empty tag or the primary tag selects the primary variant; any other
    tag selects the secondary one.
    """

    primary: str = "eng"
    secondary: str = "deu"

    @classmethod
    def from_settings(cls, settings: Settings) -> "LanguageSelector":
        return cls(primary=settings.primary_language, secondary=settings.secondary_language)

    def variant(self, language: str | None) -> LanguageVariant:
        tag = (language or "").strip().lower()
        if not tag or tag == self.primary.lower():
            return LanguageVariant.PRIMARY
        return LanguageVariant.SECONDARY

    def code(self, language: str | None) -> str:
        """Return the engine language code for a declared tag."""
        if self.variant(language) is LanguageVariant.PRIMARY:
            return self.primary
        return self.secondary
