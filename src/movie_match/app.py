"""
Public application facade for Movie Match Service.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

import requests

from .config import MovieMatchConfig
from .encoding import EncodedImage, encode_image_bytes, encode_image_file
from .exceptions import ServiceNotInitializedError
from .llm_factory import get_llm_instance
from .metadata import MovieResult, TMDBClient
from .orchestration import (
    DebouncedSuggester,
    MatchPipeline,
    MovieDetailsService,
    MoodCatalog,
    RandomMovieService,
    SuggestionService,
)
from .reconciliation import MatchStrategy
from .schemas import MovieDetailsResponse, MoodResultsPage, SearchResponse
from .tools import GoogleReverseImageSearchTool, GoogleVisionLabelTool, LLMDescriptionTool
from .verification import MetadataVerifier

logger = logging.getLogger(__name__)

ImageInput = Union[EncodedImage, bytes, str, Path]


class MovieMatchApp:
    """
    Public application facade for Movie Match Service.

    All dependency wiring happens in initialize(); each collaborator client
    receives its credentials from the config, never from ambient state.

    Usage:
        config = load_config_from_env()
        app = MovieMatchApp(config)
        app.initialize()
        response = app.search_description("a heist inside people's dreams")
    """

    def __init__(self, config: MovieMatchConfig, llm=None, session: Optional[requests.Session] = None):
        """
        :param config: MovieMatchConfig instance
        :param llm: Optional pre-built LangChain chat model (skips llm_factory)
        :param session: Optional shared requests session
        """
        self._config = config
        self._llm = llm
        self._session = session

        self._pipeline: Optional[MatchPipeline] = None
        self._suggestions: Optional[SuggestionService] = None
        self._details: Optional[MovieDetailsService] = None
        self._moods: Optional[MoodCatalog] = None
        self._random: Optional[RandomMovieService] = None

    def initialize(self) -> None:
        """
        Create clients, producers and services. Safe to call more than once.

        Producers without credentials are left out; their entry points raise
        ServiceNotInitializedError when used.
        """
        if self._pipeline:
            return

        config = self._config
        session = self._session or requests.Session()

        client = TMDBClient(
            api_key=config.tmdb_api_key,
            base_url=config.tmdb_base_url,
            timeout=config.request_timeout,
            session=session,
        )

        description_tool = None
        llm = self._llm
        if llm is None and config.llm_api_key:
            llm = get_llm_instance(config.llm_provider, config.llm_model, config.llm_api_key)
        if llm is not None:
            description_tool = LLMDescriptionTool(llm)
        else:
            logger.warning("No LLM API key configured; description search disabled")

        reverse_image_tool = None
        if config.reverse_search_enabled:
            reverse_image_tool = GoogleReverseImageSearchTool(
                api_key=config.google_api_key,
                cx=config.google_cx,
                session=session,
                timeout=config.request_timeout,
            )
        else:
            logger.info("Reverse image search not configured (GOOGLE_API_KEY/GOOGLE_CX)")

        vision_tool = None
        if config.vision_enabled:
            vision_tool = GoogleVisionLabelTool(
                api_key=config.vision_api_key,
                session=session,
                timeout=config.request_timeout,
            )
        else:
            logger.info("Vision labelling not configured (VISION_API_KEY)")

        verifier = MetadataVerifier(
            client,
            min_popularity=config.min_popularity,
            title_match_threshold=config.title_match_threshold,
            max_workers=config.max_verification_workers,
        )

        self._pipeline = MatchPipeline(
            client=client,
            verifier=verifier,
            description_tool=description_tool,
            reverse_image_tool=reverse_image_tool,
            vision_tool=vision_tool,
            default_confidence=config.default_confidence,
        )
        self._suggestions = SuggestionService(
            client,
            min_chars=config.suggestion_min_chars,
            limit=config.suggestion_limit,
            min_popularity=config.min_popularity,
        )
        self._details = MovieDetailsService(client, region=config.watch_region, cast_limit=config.cast_limit)
        self._moods = MoodCatalog(client, page_size=config.mood_page_size)
        self._random = RandomMovieService(
            client,
            max_attempts=config.random_max_attempts,
            max_page=config.random_max_page,
        )
        logger.info("Movie match app initialized")

    def _require(self, component):
        if component is None:
            raise ServiceNotInitializedError("MovieMatchApp.initialize() has not been called.")
        return component

    def _encode(self, image: ImageInput, mime_type: Optional[str]) -> EncodedImage:
        max_bytes = self._config.max_image_bytes
        if isinstance(image, EncodedImage):
            return image
        if isinstance(image, bytes):
            return encode_image_bytes(image, mime_type, max_bytes=max_bytes)
        if isinstance(image, str) and image.startswith("data:"):
            return EncodedImage.from_data_url(image, max_bytes=max_bytes)
        return encode_image_file(image, max_bytes=max_bytes)

    # ----------------------------
    # Searches
    # ----------------------------
    def search_title(self, query: str) -> MovieResult:
        return self._require(self._pipeline).search_by_title(query)

    def search_description(self, description: str) -> SearchResponse:
        return self._require(self._pipeline).search_by_description(description)

    def search_image(
        self,
        image: ImageInput,
        strategy: Union[MatchStrategy, str] = MatchStrategy.VOTE,
        mime_type: Optional[str] = None,
    ) -> SearchResponse:
        """
        :param image: EncodedImage, raw bytes (with mime_type), a data URL or a file path
        :param strategy: "vote" or "best-guess"
        """
        pipeline = self._require(self._pipeline)
        return pipeline.search_by_image(self._encode(image, mime_type), strategy)

    def suggestions(self, query: str) -> List[MovieResult]:
        return self._require(self._suggestions).fetch(query)

    def live_suggester(
        self, on_results: Callable[[str, List[MovieResult]], None]
    ) -> DebouncedSuggester:
        """
        Build a debouncer for type-ahead input. Call update() on every keystroke;
        on_results receives suggestions for the latest query only.
        """
        service = self._require(self._suggestions)
        return DebouncedSuggester(
            service.fetch, on_results, delay=self._config.suggestion_debounce_seconds
        )

    # ----------------------------
    # Browsing
    # ----------------------------
    def movie_details(self, movie_id: int) -> MovieDetailsResponse:
        return self._require(self._details).get(movie_id)

    def similar_movies(self, movie_id: int) -> List[MovieResult]:
        return self._require(self._details).similar(movie_id)

    def random_movie(self) -> MovieResult:
        return self._require(self._random).draw()

    def browse_mood(self, mood: Union[int, str], page: int = 1) -> MoodResultsPage:
        return self._require(self._moods).browse(mood, page=page)
