"""
Game Rules
==========

Decides word validity from a dictionary lookup outcome and the local
fallback list.
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from hexdrift.core.config_loader import GameConfig, get_config
from hexdrift.core.word_validator import LookupOutcome


class WordRules:
    """
    Resolves lookup outcomes into a final verdict.

    - FOUND: valid
    - NOT_FOUND: valid only if in the fallback list
    - TRANSPORT_FAILURE: valid only if in the fallback list

    Fallback matching is case-sensitive.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        if config is None:
            config = get_config()

        self._fallback_words: FrozenSet[str] = frozenset(config.validator.fallback_words)

    def in_fallback(self, word: str) -> bool:
        return word in self._fallback_words

    def resolve(self, word: str, outcome: LookupOutcome) -> bool:
        """Final validity of a word given the dictionary outcome."""
        if outcome is LookupOutcome.FOUND:
            return True
        return self.in_fallback(word)
