"""Translator port (interface)."""

from abc import ABC, abstractmethod


class ITranslator(ABC):
    """Localization lookup.

    Resolves message keys (e.g. ``profile.emailSaved``) to display strings
    in a single locale.

    Examples:
        >>> t = translator.t
        >>> t("common.error")
        'Something went wrong'
    """

    @property
    @abstractmethod
    def locale(self) -> str:
        """Locale code served by this translator (e.g. ``en``)."""
        pass

    @abstractmethod
    def t(self, key: str) -> str:
        """Translate a message key.

        Args:
            key: Dotted message key

        Returns:
            Localized string, or the key itself when no translation exists
        """
        pass
