"""
Build MovieMatchConfig from environment variables.
"""
from dotenv import load_dotenv

from .config import MovieMatchConfig
from .config_validator import (
    get_required_env,
    get_optional_env,
    get_float_env,
    validate_api_key,
)

LLM_KEY_VARIABLES = {
    "groq": "GROQ_API_KEY",
    "openai": "OPENAI_API_KEY",
}


def load_config_from_env(load_dotenv_file: bool = True) -> MovieMatchConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = MovieMatchApp(config)
        app.initialize()

    :param load_dotenv_file: Read a local .env first (disable in production)
    :return: Validated MovieMatchConfig
    :raises ConfigurationError: If required values are missing or invalid
    """
    if load_dotenv_file:
        load_dotenv()

    tmdb_api_key = validate_api_key(
        get_required_env(
            "TMDB_API_KEY",
            description="TMDB API key (https://www.themoviedb.org/settings/api)",
        ),
        "TMDB_API_KEY",
    )

    llm_provider = (get_optional_env("LLM_PROVIDER", "groq") or "groq").lower()
    llm_key_variable = LLM_KEY_VARIABLES.get(llm_provider)

    config = MovieMatchConfig(
        tmdb_api_key=tmdb_api_key,
        llm_provider=llm_provider,
        llm_model=get_optional_env("LLM_MODEL", "llama-3.1-8b-instant"),
        llm_api_key=get_optional_env(llm_key_variable) if llm_key_variable else None,
        google_api_key=get_optional_env("GOOGLE_API_KEY"),
        google_cx=get_optional_env("GOOGLE_CX"),
        vision_api_key=get_optional_env("VISION_API_KEY"),
        request_timeout=get_float_env("REQUEST_TIMEOUT", 10.0),
        min_popularity=get_float_env("MIN_POPULARITY", 1.0),
        log_level=(get_optional_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )

    return config
