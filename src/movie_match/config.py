from dataclasses import dataclass
from typing import Optional


@dataclass
class MovieMatchConfig:
    # Metadata service
    tmdb_api_key: str
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"

    # Generative text
    llm_provider: str = "groq"
    llm_model: str = "llama-3.1-8b-instant"
    llm_api_key: Optional[str] = None

    # Image producers
    google_api_key: Optional[str] = None
    google_cx: Optional[str] = None
    vision_api_key: Optional[str] = None

    # Transport
    request_timeout: float = 10.0

    # Verification policy
    min_popularity: float = 1.0
    title_match_threshold: float = 0.9
    default_confidence: int = 50
    max_verification_workers: int = 4

    # Live suggestions
    suggestion_debounce_seconds: float = 0.3
    suggestion_min_chars: int = 3
    suggestion_limit: int = 5

    # Browsing
    random_max_attempts: int = 3
    random_max_page: int = 50
    mood_page_size: int = 8
    watch_region: str = "US"
    cast_limit: int = 5

    # Uploads
    max_image_bytes: int = 10 * 1024 * 1024

    log_level: str = "INFO"

    @property
    def reverse_search_enabled(self) -> bool:
        return bool(self.google_api_key and self.google_cx)

    @property
    def vision_enabled(self) -> bool:
        return bool(self.vision_api_key)
