"""Unit tests for the speechlet and reply envelope builders."""

from __future__ import annotations

from service_skill_engine.services import response_builder as rb

# pylint: disable=missing-function-docstring


def test_build_speechlet_response_without_reprompt() -> None:
    speechlet = rb.build_speechlet_response("Title", "Spoken text", None, True)
    assert speechlet.reprompt is None
    assert speechlet.should_end_session is True
    assert speechlet.card.title == "Title"
    assert speechlet.card.content == "Spoken text"
    assert speechlet.output_speech.text == "Spoken text"

    payload = rb.build_response({}, speechlet)
    assert "reprompt" not in payload["response"]
    assert payload["response"]["shouldEndSession"] is True


def test_build_speechlet_response_with_reprompt() -> None:
    speechlet = rb.build_speechlet_response("Title", "Hello", "Anything else?", False)
    assert speechlet.reprompt is not None
    assert speechlet.reprompt.output_speech.text == "Anything else?"
    assert speechlet.should_end_session is False


def test_empty_reprompt_is_kept() -> None:
    speechlet = rb.build_speechlet_response("GetServiceInfo", "EC2 description", "", False)
    payload = rb.build_response({}, speechlet)
    assert payload["response"]["reprompt"] == {
        "outputSpeech": {"type": "PlainText", "text": ""}
    }


def test_build_response_envelope_shape() -> None:
    speechlet = rb.build_speechlet_response("Title", "Hello", "Again?", False)
    payload = rb.build_response({"visits": 2}, speechlet)
    assert payload == {
        "version": "1.0",
        "sessionAttributes": {"visits": 2},
        "response": {
            "outputSpeech": {"type": "PlainText", "text": "Hello"},
            "card": {"type": "Simple", "title": "Title", "content": "Hello"},
            "reprompt": {"outputSpeech": {"type": "PlainText", "text": "Again?"}},
            "shouldEndSession": False,
        },
    }


def test_build_response_copies_session_attributes() -> None:
    attributes = {"key": "value"}
    payload = rb.build_response(attributes, rb.build_speechlet_response("t", "s", None, True))
    payload["sessionAttributes"]["key"] = "changed"
    assert attributes == {"key": "value"}
