"""
Alina Chat - Follow-up Suggestions

Pure function producing up to four suggestion chips for the chat UI.
No external calls; never raises.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from alina.agents.enrichment import UNKNOWN
from alina.keywords import Category, detect_category
from alina.models import MovieMetadata

MAX_SUGGESTIONS = 4

CATEGORY_SUGGESTIONS: Dict[Category, List[str]] = {
    Category.HORROR: [
        "Best horror movies of all time",
        "Psychological thrillers",
        "Horror movies from the 80s",
    ],
    Category.COMEDY: [
        "Best comedy movies",
        "Romantic comedies",
        "Comedy TV shows",
    ],
    Category.ACTION: [
        "Best action movies",
        "Superhero movies",
        "Action movies from the 90s",
    ],
}

GENERIC_SUGGESTIONS: List[str] = [
    "Suggest a scary movie",
    "Recommend a funny movie",
    "Top rated action movies",
    "Tell me about Inception",
]


def _metadata_suggestions(metadata: MovieMetadata) -> List[str]:
    title = metadata.title
    first_genre = metadata.genre.split(",")[0].strip()
    return [
        f"Tell me more about {title}",
        f"Movies similar to {title}",
        f"More movies by {metadata.director}"
        if metadata.director != UNKNOWN else f"Who directed {title}?",
        f"Best {first_genre} movies"
        if first_genre and first_genre != UNKNOWN else f"Fun facts about {title}",
    ]


def generate_suggestions(message: str, metadata: Optional[MovieMetadata] = None) -> List[str]:
    if metadata:
        suggestions = _metadata_suggestions(metadata)
    else:
        category = detect_category(message)
        suggestions = CATEGORY_SUGGESTIONS[category] if category else GENERIC_SUGGESTIONS
    return list(suggestions[:MAX_SUGGESTIONS])
