from app.config.language import LanguageSelector
from app.config.settings import Settings
from app.logging.logger import Log
from app.normalization.base import BaseNormalizer
from app.normalization.engine_base import BaseSpellEngine
from app.normalization.normalizer import TextNormalizer
from app.normalization.null_engine_adapter import NullSpellEngine
from app.normalization.symspell_adapter import SymSpellEngine


class SpellEngineFactory:
    """Creates the spelling engines for the primary and secondary languages."""

    @classmethod
    def create_primary(cls, settings: Settings) -> BaseSpellEngine:
        """Use the configured dictionary, else symspellpy's bundled English one."""
        path = settings.primary_dictionary_path.strip()
        if path:
            return SymSpellEngine.from_dictionary(
                path, max_edit_distance=settings.max_edit_distance
            )
        return SymSpellEngine.bundled_english(max_edit_distance=settings.max_edit_distance)

    @classmethod
    def create_secondary(cls, settings: Settings) -> BaseSpellEngine:
        path = settings.secondary_dictionary_path.strip()
        if not path:
            Log.warning(
                f"No dictionary configured for '{settings.secondary_language}', "
                "secondary-language text will not be spell-corrected"
            )
            return NullSpellEngine()
        return SymSpellEngine.from_dictionary(path, max_edit_distance=settings.max_edit_distance)


class NormalizerFactory:
    """Creates the configured text normalizer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseNormalizer:
        return TextNormalizer(
            primary_engine=SpellEngineFactory.create_primary(settings),
            secondary_engine=SpellEngineFactory.create_secondary(settings),
            languages=LanguageSelector.from_settings(settings),
            replacement=settings.digit_pass_replacement,
        )
