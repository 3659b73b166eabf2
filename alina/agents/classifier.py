"""
Alina Chat - Query Classifier

Decides whether a user message looks like a movie/show question and,
if so, extracts the phrase to search the catalog with.

Known limitation: this is a keyword heuristic. It fires on ordinary
sentences that happen to contain a trigger ("the show must go on") and
misses bare titles with no trigger ("Inception").
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from alina.keywords import STRIP_PATTERN, TRIGGER_PATTERN

logger = logging.getLogger(__name__)

_EDGE_PUNCTUATION = " \t\n\"'`.,;:!?-"


def extract_search_phrase(text: str) -> Optional[str]:
    """
    Return a cleaned catalog search phrase, or None when the message
    is not a catalog lookup.
    """
    if not text or not TRIGGER_PATTERN.search(text):
        return None

    phrase = STRIP_PATTERN.sub(" ", text)
    phrase = re.sub(r"\s+", " ", phrase).strip(_EDGE_PUNCTUATION)

    if not phrase:
        logger.debug("Catalog trigger matched but nothing left to search: %r", text[:80])
        return None
    return phrase
