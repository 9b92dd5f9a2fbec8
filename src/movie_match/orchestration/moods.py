"""
Mood picker: each mood maps to a genre and browses it page by page.
"""
import logging
from typing import List, Union

from ..metadata import TMDBClient, is_eligible
from ..schemas import Mood, MoodResultsPage
from ..security import ValidationError

logger = logging.getLogger(__name__)

MOODS: List[Mood] = [
    Mood(1, "Tense", (27,), "Heart-pounding suspense and chilling moments"),
    Mood(2, "Light-hearted", (35,), "Laugh-out-loud fun and cheerful stories"),
    Mood(3, "Passionate", (10749,), "Deep connections and heartfelt emotions"),
    Mood(4, "Thrilling", (28,), "Adrenaline-pumping excitement"),
    Mood(5, "Emotional", (18,), "Powerful human stories"),
    Mood(6, "Imaginative", (878,), "Futuristic visions and possibilities"),
    Mood(7, "Magical", (14,), "Enchanted worlds and adventures"),
    Mood(8, "Intriguing", (9648,), "Mind-bending puzzles"),
    Mood(9, "Nervous", (53,), "Edge-of-your-seat tension"),
]


def find_mood(mood: Union[int, str, Mood]) -> Mood:
    """
    Look a mood up by id, name (case-insensitive) or instance.

    :raises ValidationError: Unknown mood
    """
    if isinstance(mood, Mood):
        return mood
    for candidate in MOODS:
        if isinstance(mood, int) and not isinstance(mood, bool) and candidate.id == mood:
            return candidate
        if isinstance(mood, str) and candidate.name.lower() == mood.strip().lower():
            return candidate
    raise ValidationError(f"Unknown mood: {mood!r}")


class MoodCatalog:
    """Browses movies for a mood, most popular first."""

    def __init__(self, client: TMDBClient, page_size: int = 8):
        self._client = client
        self.page_size = page_size

    def browse(self, mood: Union[int, str, Mood], page: int = 1) -> MoodResultsPage:
        """
        :param mood: Mood id, name or instance
        :param page: 1-based page number
        :raises ValidationError: Unknown mood or invalid page
        :raises TransportError: Metadata service failure
        """
        selected = find_mood(mood)
        if not isinstance(page, int) or page < 1:
            raise ValidationError(f"Page must be a positive integer, got {page!r}")

        movie_page = self._client.discover_by_genre(selected.genre_ids, page=page)
        movies = [m for m in movie_page.results if is_eligible(m)][: self.page_size]
        logger.info(
            f"Mood '{selected.name}' page {page}/{movie_page.total_pages}: {len(movies)} movies"
        )
        return MoodResultsPage(
            mood=selected,
            movies=movies,
            page=movie_page.page,
            total_pages=movie_page.total_pages,
        )
