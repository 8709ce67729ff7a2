"""Translation hook and label helpers."""

import re
import unicodedata
from collections.abc import Mapping

__all__ = ["Translator", "slugify"]

_NON_SLUG = re.compile(r"[^a-z0-9]+")


class Translator:
    """Mapping-backed translation lookup.

    Keys are tried with the configured prefix first (``validation.attributes.email``),
    then bare (``email``). Text without a translation comes back unchanged.

    Example:
        >>> t = Translator({"email": "E-mail address"})
        >>> t("email")
        'E-mail address'
        >>> t("Unknown text")
        'Unknown text'
    """

    def __init__(self, messages: Mapping[str, str] | None = None, prefix: str = ""):
        self.messages = dict(messages or {})
        self.prefix = prefix

    def translate(self, text: str | None) -> str | None:
        if not text:
            return text

        for key in self._candidates(text):
            if key in self.messages:
                return self.messages[key]
        return text

    __call__ = translate

    def _candidates(self, text: str) -> list[str]:
        keys = [text]
        if self.prefix:
            keys.insert(0, f"{self.prefix}.{text}")
        return keys


def slugify(text: str, separator: str = "-") -> str:
    """Turn a label into a field name.

    Example:
        >>> slugify("Your E-mail Address")
        'your-e-mail-address'
        >>> slugify("Prénom", separator="_")
        'prenom'
    """
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return _NON_SLUG.sub(separator, ascii_text.lower()).strip(separator)
