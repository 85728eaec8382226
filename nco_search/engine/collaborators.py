"""
nco_search/engine/collaborators.py

Capability interfaces for the pieces that live outside the search core.

The engine only calls these protocols; browser speech APIs, translation
dictionaries and the like are supplied by the host application.
"""

from __future__ import annotations

from typing import Protocol


class Translator(Protocol):
    """Look up a UI string by key.  Unknown keys are returned unchanged."""

    def translate(self, key: str, language: str) -> str: ...


class SpeechRecognizer(Protocol):
    """Capture one utterance and return its transcript."""

    def recognize_speech(self, language: str) -> str: ...


class DictTranslator:
    """
    ``Translator`` backed by nested dictionaries ``{language: {key: text}}``.

    Falls back to English, then to the key itself.
    """

    def __init__(self, strings: dict[str, dict[str, str]], default_language: str = "en") -> None:
        self._strings  = strings
        self._default  = default_language

    def translate(self, key: str, language: str) -> str:
        table = self._strings.get(language, {})
        if key in table:
            return table[key]
        return self._strings.get(self._default, {}).get(key, key)
