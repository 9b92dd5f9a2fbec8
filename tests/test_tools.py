"""
Tests for the signal producers (generative text, reverse image search, vision).
"""
import pytest
from unittest.mock import Mock

from langchain_core.language_models.fake_chat_models import FakeListChatModel

from movie_match.encoding import EncodedImage
from movie_match.exceptions import TransportError
from movie_match.prompts import DESCRIPTION_PROMPT
from movie_match.tools import (
    GoogleReverseImageSearchTool,
    GoogleVisionLabelTool,
    LLMDescriptionTool,
)

IMAGE = EncodedImage(content="aGVsbG8=", mime_type="image/png", size_bytes=5)


def response(payload, status_code=200):
    resp = Mock()
    resp.status_code = status_code
    resp.text = str(payload)
    resp.json.return_value = payload
    return resp


class TestDescriptionPrompt:
    def test_prompt_carries_description_and_bounds(self):
        messages = DESCRIPTION_PROMPT.format_messages(
            description="a heist in dreams", min_results=5, max_results=7
        )

        assert "between 5 and 7" in messages[0].content
        assert "a heist in dreams" in messages[1].content


class TestLLMDescriptionTool:
    """Tests for the generative-text producer."""

    def test_returns_raw_model_text(self):
        text = "1. Inception (2010) - 92% - Dream heist"
        tool = LLMDescriptionTool(FakeListChatModel(responses=[text]))

        assert tool.describe("a heist in dreams") == text

    def test_model_failure_becomes_transport_error(self):
        def broken_model(prompt_value):
            raise RuntimeError("rate limited")

        tool = LLMDescriptionTool(broken_model)

        with pytest.raises(TransportError, match="RuntimeError"):
            tool.describe("a heist in dreams")

    def test_failure_message_hides_provider_details(self):
        def broken_model(prompt_value):
            raise RuntimeError("401 for https://llm.test/v1?key=SECRETKEY1234567890")

        with pytest.raises(TransportError) as exc_info:
            LLMDescriptionTool(broken_model).describe("a heist in dreams")

        assert "SECRETKEY" not in str(exc_info.value)


class TestGoogleReverseImageSearchTool:
    """Tests for the reverse image search producer."""

    def test_requires_credentials(self):
        with pytest.raises(ValueError):
            GoogleReverseImageSearchTool(api_key="key", cx="")

    def test_posts_image_and_returns_items(self):
        session = Mock()
        session.request.return_value = response(
            {
                "items": [
                    {"title": '"Inception" screenshot', "snippet": "Inception (2010)", "link": "https://a"},
                    {"title": "Interstellar • Wikipedia"},
                ]
            }
        )
        tool = GoogleReverseImageSearchTool(api_key="key", cx="engine", session=session)

        items = tool.search(IMAGE)

        assert [i.title for i in items] == ['"Inception" screenshot', "Interstellar • Wikipedia"]
        assert items[1].snippet is None
        kwargs = session.request.call_args.kwargs
        assert session.request.call_args.args[0] == "POST"
        assert kwargs["params"]["searchType"] == "image"
        assert kwargs["json"] == {"image": {"image": "aGVsbG8="}}

    def test_no_items(self):
        session = Mock()
        session.request.return_value = response({"searchInformation": {"totalResults": "0"}})
        tool = GoogleReverseImageSearchTool(api_key="key", cx="engine", session=session)

        assert tool.search(IMAGE) == []

    def test_http_failure(self):
        session = Mock()
        session.request.return_value = response({"error": "quota"}, status_code=403)
        tool = GoogleReverseImageSearchTool(api_key="key", cx="engine", session=session)

        with pytest.raises(TransportError):
            tool.search(IMAGE)


class TestGoogleVisionLabelTool:
    """Tests for the vision label producer."""

    def test_flattens_annotations(self):
        session = Mock()
        session.request.return_value = response(
            {
                "responses": [
                    {
                        "webDetection": {
                            "bestGuessLabels": [{"label": "inception poster"}],
                            "webEntities": [
                                {"description": "Inception (2010 film)", "score": 1.2},
                                {"score": 0.4},
                            ],
                        },
                        "textAnnotations": [{"description": "INCEPTION\nJULY 16"}],
                    }
                ]
            }
        )
        tool = GoogleVisionLabelTool(api_key="key", session=session)

        annotations = tool.annotate(IMAGE)

        assert annotations.best_guess_labels == ["inception poster"]
        assert annotations.web_entities == ["Inception (2010 film)"]
        assert annotations.text_annotations == ["INCEPTION\nJULY 16"]
        body = session.request.call_args.kwargs["json"]
        features = [f["type"] for f in body["requests"][0]["features"]]
        assert features == ["WEB_DETECTION", "TEXT_DETECTION"]

    def test_empty_response(self):
        session = Mock()
        session.request.return_value = response({"responses": [{}]})
        tool = GoogleVisionLabelTool(api_key="key", session=session)

        annotations = tool.annotate(IMAGE)

        assert annotations.best_guess_labels == []
        assert annotations.web_entities == []
        assert annotations.text_annotations == []

    def test_per_image_error_is_a_transport_error(self):
        session = Mock()
        session.request.return_value = response(
            {"responses": [{"error": {"code": 7, "message": "billing disabled"}}]}
        )
        tool = GoogleVisionLabelTool(api_key="key", session=session)

        with pytest.raises(TransportError, match="billing disabled"):
            tool.annotate(IMAGE)

    def test_malformed_annotation_entries_are_skipped(self):
        session = Mock()
        session.request.return_value = response(
            {
                "responses": [
                    {
                        "webDetection": {
                            "bestGuessLabels": ["not a dict", {"label": "heat 1995"}],
                            "webEntities": [None, 42, {"description": "Heat (1995 film)"}],
                        },
                        "textAnnotations": ["HEAT", {"description": None}],
                    }
                ]
            }
        )
        tool = GoogleVisionLabelTool(api_key="key", session=session)

        annotations = tool.annotate(IMAGE)

        assert annotations.best_guess_labels == ["heat 1995"]
        assert annotations.web_entities == ["Heat (1995 film)"]
        assert annotations.text_annotations == []
