#!/usr/bin/python3
import unittest
import requests
from unittest.mock import MagicMock, patch

from baba.models import ApiConfig, AudienceType, Gender, Language, TranslationRequest
from baba.services.translation_service import (
    TranslationAPIError,
    TranslationService,
    TranslationWorker,
    fallback_translation,
    _extract_content
)

def _response(status=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response

def _completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}

class TranslationServiceTests(unittest.TestCase):
    def setUp(self):
        self.config = ApiConfig(api_key="sk-test", model_name="model-x")
        self.service = TranslationService(self.config)
        self.request = TranslationRequest(
            "Hello", Language.ENGLISH, Language.HEBREW, Gender.FEMALE, AudienceType.GROUP_FEMALES
        )

    def test_translate_posts_chat_completion(self):
        with patch("baba.services.translation_service.requests.post") as mock_post:
            mock_post.return_value = _response(payload=_completion("  שלום  "))
            result = self.service.translate(self.request)

        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], "https://api.openai.com/v1/chat/completions")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer sk-test")
        self.assertEqual(kwargs["headers"]["Content-Type"], "application/json")
        body = kwargs["json"]
        self.assertEqual(body["model"], "model-x")
        self.assertEqual(body["max_tokens"], 500)
        self.assertEqual(body["temperature"], 0.3)
        self.assertEqual(len(body["messages"]), 1)
        self.assertEqual(body["messages"][0]["role"], "user")
        self.assertIn('"Hello"', body["messages"][0]["content"])
        self.assertIn("group of females", body["messages"][0]["content"])

        self.assertEqual(result.translated_text, "שלום")
        self.assertEqual(result.original_text, "Hello")
        self.assertEqual(result.from_language, Language.ENGLISH)
        self.assertEqual(result.to_language, Language.HEBREW)
        self.assertEqual(result.context_used, "group_females")
        self.assertFalse(result.is_fallback)

    def test_transport_failure_returns_placeholder(self):
        request = TranslationRequest("Hello", Language.ENGLISH, Language.HEBREW)
        with patch(
            "baba.services.translation_service.requests.post",
            side_effect=requests.ConnectionError("offline"),
        ):
            result = self.service.translate(request)

        self.assertEqual(result.translated_text, "[Hebrew translation of: Hello]")
        self.assertEqual(result.context_used, "general")
        self.assertTrue(result.is_fallback)
        self.assertIn("offline", result.error)

    def test_unencodable_api_key_returns_placeholder(self):
        service = TranslationService(ApiConfig(api_key="sk–abc"))
        request = TranslationRequest("Hello", Language.ENGLISH, Language.HEBREW)
        encode_error = UnicodeEncodeError("latin-1", "Bearer sk–abc", 9, 10, "ordinal not in range(256)")
        with patch("baba.services.translation_service.requests.post", side_effect=encode_error):
            result = service.translate(request)

        self.assertEqual(result.translated_text, "[Hebrew translation of: Hello]")
        self.assertTrue(result.is_fallback)
        self.assertIn("latin-1", result.error)

    def test_bad_status_returns_placeholder(self):
        request = TranslationRequest("שלום", Language.HEBREW, Language.ENGLISH, audience_type=AudienceType.MALE)
        with patch("baba.services.translation_service.requests.post") as mock_post:
            mock_post.return_value = _response(status=401, payload={"error": "bad key"})
            result = self.service.translate(request)

        self.assertEqual(result.translated_text, "[English translation of: שלום]")
        self.assertEqual(result.error, "Translation API error: 401")
        self.assertEqual(result.context_used, "male")

    def test_invalid_json_returns_placeholder(self):
        with patch("baba.services.translation_service.requests.post") as mock_post:
            mock_post.return_value = _response(json_error=ValueError("not json"))
            result = self.service.translate(self.request)

        self.assertTrue(result.is_fallback)
        self.assertEqual(result.translated_text, "[Hebrew translation of: Hello]")

    def test_empty_api_key_skips_request(self):
        service = TranslationService(ApiConfig(api_key=""))
        with patch("baba.services.translation_service.requests.post") as mock_post:
            result = service.translate(self.request)

        mock_post.assert_not_called()
        self.assertEqual(result.error, "API key is empty.")

    def test_empty_completion_uses_failed_marker(self):
        with patch("baba.services.translation_service.requests.post") as mock_post:
            mock_post.return_value = _response(payload={"choices": []})
            result = self.service.translate(self.request)

        self.assertEqual(result.translated_text, "Translation failed")
        self.assertFalse(result.is_fallback)

    def test_unknown_audience_string_is_reported_verbatim(self):
        request = TranslationRequest("Hi", Language.ENGLISH, Language.HEBREW, audience_type="stadium")
        with patch("baba.services.translation_service.requests.post") as mock_post:
            mock_post.return_value = _response(payload=_completion("היי"))
            result = self.service.translate(request)

        self.assertEqual(result.context_used, "stadium")
        self.assertNotIn("Context:", mock_post.call_args.kwargs["json"]["messages"][0]["content"])

class ResponseParsingTests(unittest.TestCase):
    def test_extract_content_strips_whitespace(self):
        self.assertEqual(_extract_content(_completion("\n hi \n")), "hi")

    def test_missing_or_blank_content_is_failed_marker(self):
        self.assertEqual(_extract_content({"choices": [{}]}), "Translation failed")
        self.assertEqual(_extract_content({"choices": [{"message": {"content": None}}]}), "Translation failed")
        self.assertEqual(_extract_content(_completion("   ")), "Translation failed")

    def test_malformed_body_raises(self):
        with self.assertRaises(TranslationAPIError):
            _extract_content({"error": "quota"})
        with self.assertRaises(TranslationAPIError):
            _extract_content(["choices"])

    def test_fallback_uses_source_language_to_pick_label(self):
        request = TranslationRequest("Hi", Language.ENGLISH, Language.HEBREW)
        self.assertEqual(fallback_translation(request), "[Hebrew translation of: Hi]")

class TranslationWorkerTests(unittest.TestCase):
    def test_get_worker_binds_service_and_request(self):
        service = TranslationService(ApiConfig(api_key="k"))
        request = TranslationRequest("Hi", Language.ENGLISH, Language.HEBREW)
        worker = service.get_worker(request)
        self.assertIsInstance(worker, TranslationWorker)
        self.assertIs(worker.service, service)
        self.assertIs(worker.request, request)

    def test_worker_emits_result_and_finishes(self):
        class DummyService:
            def translate(self, request):
                return "result-for-" + request.text

        request = TranslationRequest("Hi", Language.ENGLISH, Language.HEBREW)
        worker = TranslationWorker(DummyService(), request)
        emitted = []
        ended = []

        worker.completed.connect(emitted.append)
        worker.finished.connect(lambda: ended.append(True))

        worker.run()

        self.assertEqual(emitted, ["result-for-Hi"])
        self.assertTrue(ended)

if __name__ == "__main__":
    unittest.main()
