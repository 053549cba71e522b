"""
Unit tests for inbound request validation.
"""

import pytest

from classification_service.validation.exceptions import InvalidInputError
from classification_service.validation.request import (
    TEXT_EMPTY_MESSAGE,
    TEXT_REQUIRED_MESSAGE,
    parse_classification_request,
)


class TestParseClassificationRequest:
    """Test suite for parse_classification_request."""

    def test_valid_text(self):
        request = parse_classification_request({"text": "Order Domino's pizza"})

        assert request.text == "Order Domino's pizza"

    def test_text_kept_verbatim(self):
        request = parse_classification_request({"text": "  padded  "})

        assert request.text == "  padded  "

    def test_extra_fields_are_ignored(self):
        request = parse_classification_request({"text": "hi", "lang": "en"})

        assert request.text == "hi"

    @pytest.mark.parametrize(
        "payload",
        [None, {}, {"text": None}, {"text": 0}, {"text": False}, {"text": 3.5}, {"text": []}, [], "text", 42],
    )
    def test_missing_or_wrong_type(self, payload):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_classification_request(payload)

        assert exc_info.value.message == TEXT_REQUIRED_MESSAGE
        assert exc_info.value.details == {"field": "text"}

    @pytest.mark.parametrize("text", ["", " ", "\n\t", "　"])
    def test_blank_text(self, text):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_classification_request({"text": text})

        assert exc_info.value.message == TEXT_EMPTY_MESSAGE

    def test_same_input_same_error(self):
        messages = set()
        for _ in range(3):
            with pytest.raises(InvalidInputError) as exc_info:
                parse_classification_request({"text": "   "})
            messages.add(exc_info.value.message)

        assert messages == {TEXT_EMPTY_MESSAGE}
