"""
Generative-text producer: movie description in, ranked list text out.
"""
import logging
from typing import Any, Protocol

from langchain_core.prompts import ChatPromptTemplate

from ..exceptions import TransportError
from ..prompts import DESCRIPTION_PROMPT
from ..transport import redact_url, truncate

logger = logging.getLogger(__name__)


class DescriptionTool(Protocol):
    """Protocol for a producer that turns a description into list text."""
    def describe(self, description: str) -> str:
        ...


class LLMDescriptionTool:
    """
    DescriptionTool backed by any LangChain chat model.

    The prompt imposes the "<rank>. <title> (<year>) - <confidence>% - <explanation>"
    grammar; the raw response text is returned unparsed.
    """

    def __init__(
        self,
        llm: Any,
        prompt: ChatPromptTemplate = DESCRIPTION_PROMPT,
        min_results: int = 5,
        max_results: int = 7,
    ):
        """
        :param llm: LangChain chat model (see llm_factory.get_llm_instance)
        :param prompt: Prompt template with a {description} variable
        :param min_results: Lower bound on suggestions requested
        :param max_results: Upper bound on suggestions requested
        """
        self._chain = prompt | llm
        self._min_results = min_results
        self._max_results = max_results

    def describe(self, description: str) -> str:
        """
        :raises TransportError: If the model call fails
        """
        try:
            message = self._chain.invoke(
                {
                    "description": description,
                    "min_results": self._min_results,
                    "max_results": self._max_results,
                }
            )
        except Exception as e:
            logger.warning(
                f"Generative-text call failed for description ({len(description)} chars): "
                f"{redact_url(str(e))}"
            )
            raise TransportError(f"Generative-text service failed ({type(e).__name__})") from e

        text = getattr(message, "content", message)
        if not isinstance(text, str):
            text = str(text)
        logger.debug(f"Generative-text response: {truncate(text)}")
        return text
