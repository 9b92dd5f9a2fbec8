"""
Use-case orchestration on top of producers, reconciliation and verification.
"""
from .match_pipeline import MatchPipeline
from .suggestions import SuggestionService, DebouncedSuggester
from .random_movie import RandomMovieService
from .moods import MOODS, MoodCatalog, find_mood
from .movie_details import MovieDetailsService, pick_trailer

__all__ = [
    "MatchPipeline",
    "SuggestionService",
    "DebouncedSuggester",
    "RandomMovieService",
    "MOODS",
    "MoodCatalog",
    "find_mood",
    "MovieDetailsService",
    "pick_trailer",
]
