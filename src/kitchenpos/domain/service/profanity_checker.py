"""Port for the external profanity classifier.

Product and menu names go through it before they are stored. The
classification itself is done elsewhere; the infrastructure layer
provides the adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProfanityChecker(ABC):

    @abstractmethod
    def contains_profanity(self, text: str) -> bool:
        """Return True if *text* contains banned language."""
