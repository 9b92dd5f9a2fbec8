"""
Match Pipeline

Runs one search from raw input to verified movies:
1. Validate input (before any collaborator call)
2. Signal producer -> raw output
3. Reconciliation strategy -> ranked matches
4. Metadata verifier -> verified movies
"""

import logging
from time import time
from typing import List, Optional, Union

from ..encoding import EncodedImage
from ..exceptions import NoCandidateError, NoMatchError, ServiceNotInitializedError
from ..metadata import MovieResult, TMDBClient, is_eligible
from ..models import ReconciledMatch
from ..reconciliation import (
    BestGuessReconciler,
    MatchStrategy,
    StrictParseReconciler,
    VoteReconciler,
)
from ..schemas import SearchResponse
from ..security import InputValidator, ValidationError
from ..tools import DescriptionTool, ReverseImageSearchTool, VisionLabelTool
from ..verification import MetadataVerifier

logger = logging.getLogger(__name__)

NO_DESCRIPTION_CANDIDATES = (
    "We couldn't turn that description into movie suggestions. "
    "Try adding details such as the plot, setting, actors or decade."
)
NO_IMAGE_CANDIDATES = (
    "We couldn't recognize a movie in that image. "
    "Try a clearer poster or film still without heavy cropping or overlays."
)
NO_VERIFIED_MATCHES = (
    "We found possible titles but none matched a movie in our catalog. "
    "Try rephrasing or searching by title instead."
)


class MatchPipeline:
    """
    Orchestrates producer -> reconciliation -> verification for each entry point.

    Producers are optional; calling an entry point whose producer was not
    configured raises ServiceNotInitializedError.
    """

    def __init__(
        self,
        client: TMDBClient,
        verifier: MetadataVerifier,
        description_tool: Optional[DescriptionTool] = None,
        reverse_image_tool: Optional[ReverseImageSearchTool] = None,
        vision_tool: Optional[VisionLabelTool] = None,
        default_confidence: int = 50,
    ):
        """
        :param client: Metadata client (used directly by title search)
        :param verifier: MetadataVerifier for candidate confirmation
        :param description_tool: Generative-text producer
        :param reverse_image_tool: Reverse image search producer
        :param vision_tool: Vision label producer
        :param default_confidence: Confidence for producers that give none
        """
        self._client = client
        self._verifier = verifier
        self._description_tool = description_tool
        self._reverse_image_tool = reverse_image_tool
        self._vision_tool = vision_tool

        self._strict_parse = StrictParseReconciler()
        self._vote = VoteReconciler()
        self._best_guess = BestGuessReconciler(default_confidence=default_confidence)

    # ----------------------------
    # Title search
    # ----------------------------
    def search_by_title(self, query: str) -> MovieResult:
        """
        Return the first eligible metadata result for a typed title.

        :raises ValidationError: Empty or invalid query
        :raises NoMatchError: No eligible result
        :raises TransportError: Metadata service failure
        """
        query = InputValidator.validate_query(query, field_name="Title")
        results = self._client.search_movies(query)
        for result in results:
            if is_eligible(result, self._verifier.min_popularity):
                return result
        logger.info(f"Title search '{query}': {len(results)} results, none eligible")
        raise NoMatchError(f"No movies found for '{query}'.")

    # ----------------------------
    # Description search
    # ----------------------------
    def search_by_description(self, description: str) -> SearchResponse:
        """
        Suggest and verify movies for a natural-language description.

        :raises ValidationError: Invalid description
        :raises ServiceNotInitializedError: No generative-text producer
        :raises TransportError: Generative-text service failure
        :raises NoCandidateError: No line of the response could be parsed
        """
        description = InputValidator.validate_query(description, field_name="Description")
        if self._description_tool is None:
            raise ServiceNotInitializedError("Description search is not configured.")

        start_time = time()
        raw = self._description_tool.describe(description)
        matches = self._strict_parse.reconcile(raw)
        if not matches:
            logger.warning(f"Description search produced no parsable lines ({len(raw)} chars)")
            raise NoCandidateError(NO_DESCRIPTION_CANDIDATES)

        return self._verify(matches, MatchStrategy.STRICT_PARSE, start_time)

    # ----------------------------
    # Image search
    # ----------------------------
    def search_by_image(
        self,
        image: EncodedImage,
        strategy: Union[MatchStrategy, str] = MatchStrategy.VOTE,
    ) -> SearchResponse:
        """
        Identify the movie in an image.

        :param image: Validated, encoded image
        :param strategy: "vote" (reverse image search) or "best-guess" (vision labels)
        :raises ValidationError: Unsupported strategy or missing image
        :raises ServiceNotInitializedError: Producer for the strategy not configured
        :raises TransportError: Producer failure
        :raises NoCandidateError: No usable title in the producer output
        """
        if not isinstance(image, EncodedImage) or not image.content:
            raise ValidationError("An encoded image is required")
        try:
            strategy = MatchStrategy(strategy)
        except ValueError:
            raise ValidationError(f"Unsupported image strategy: {strategy}")

        start_time = time()
        if strategy is MatchStrategy.VOTE:
            if self._reverse_image_tool is None:
                raise ServiceNotInitializedError("Reverse image search is not configured.")
            matches = self._vote.reconcile(self._reverse_image_tool.search(image))
        elif strategy is MatchStrategy.BEST_GUESS:
            if self._vision_tool is None:
                raise ServiceNotInitializedError("Vision labelling is not configured.")
            matches = self._best_guess.reconcile(self._vision_tool.annotate(image))
        else:
            raise ValidationError(f"Strategy '{strategy.value}' does not apply to images")

        if not matches:
            logger.warning(
                f"Image search ({strategy.value}) found no candidate: "
                f"type={image.mime_type}, size={image.size_bytes}"
            )
            raise NoCandidateError(NO_IMAGE_CANDIDATES)

        return self._verify(matches, strategy, start_time)

    def _verify(
        self,
        matches: List[ReconciledMatch],
        strategy: MatchStrategy,
        start_time: float,
    ) -> SearchResponse:
        verified = self._verifier.verify(matches)
        latency_ms = int((time() - start_time) * 1000)
        logger.info(
            f"Search ({strategy.value}) - {len(matches)} candidates, "
            f"{len(verified)} verified, {latency_ms}ms"
        )
        return SearchResponse(
            matches=verified,
            strategy=strategy.value,
            candidates_considered=len(matches),
            message=None if verified else NO_VERIFIED_MATCHES,
            latency_ms=latency_ms,
        )
