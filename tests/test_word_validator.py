"""
Tests for dictionary lookups, fallback resolution and validation workers.
"""

import threading

import pytest
import requests

from hexdrift.core.config_loader import load_config
from hexdrift.core.rules import WordRules
from hexdrift.core.word_validator import (
    DictionaryLookup,
    InlineValidationWorker,
    LookupOutcome,
    Submission,
    ValidationWorker,
)


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code

    @property
    def ok(self):
        return 200 <= self.status_code < 400


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def rules(config):
    return WordRules(config)


@pytest.fixture
def lookup(config):
    return DictionaryLookup(config)


class TestDictionaryLookup:
    """Test the HTTP lookup (network mocked)."""

    def test_found(self, monkeypatch, config, lookup):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse(200)

        monkeypatch.setattr(requests, "get", fake_get)

        assert lookup("HOUSE") is LookupOutcome.FOUND
        assert calls == [(
            "https://api.dictionaryapi.dev/api/v2/entries/en/house",
            config.validator.timeout_seconds
        )]

    def test_not_found(self, monkeypatch, lookup):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(404))
        assert lookup("QXZT") is LookupOutcome.NOT_FOUND

    @pytest.mark.parametrize("error", [
        requests.ConnectionError("offline"),
        requests.Timeout("slow"),
    ])
    def test_transport_failure(self, monkeypatch, lookup, error):
        def fake_get(url, timeout):
            raise error

        monkeypatch.setattr(requests, "get", fake_get)

        assert lookup("CAT") is LookupOutcome.TRANSPORT_FAILURE

    def test_uses_session(self, config):
        class FakeSession:
            def __init__(self):
                self.urls = []

            def get(self, url, timeout):
                self.urls.append(url)
                return FakeResponse(200)

        session = FakeSession()
        lookup = DictionaryLookup(config, session=session)

        assert lookup("Moon") is LookupOutcome.FOUND
        assert session.urls == ["https://api.dictionaryapi.dev/api/v2/entries/en/moon"]


class TestWordRules:
    """Test verdict resolution with the fallback list."""

    def test_found_is_valid(self, rules):
        assert rules.resolve("ZEBRA", LookupOutcome.FOUND)

    @pytest.mark.parametrize("outcome", [LookupOutcome.NOT_FOUND, LookupOutcome.TRANSPORT_FAILURE])
    def test_fallback_words_valid(self, rules, outcome):
        for word in ["CAT", "DOG", "MOUSE", "HOUSE", "FIRE", "TREE", "BIRD", "STAR", "MOON", "PLANET"]:
            assert rules.resolve(word, outcome)

    @pytest.mark.parametrize("outcome", [LookupOutcome.NOT_FOUND, LookupOutcome.TRANSPORT_FAILURE])
    def test_unknown_word_invalid(self, rules, outcome):
        assert not rules.resolve("QXZT", outcome)

    def test_fallback_case_sensitive(self, rules):
        assert not rules.resolve("cat", LookupOutcome.TRANSPORT_FAILURE)
        assert rules.resolve("CAT", LookupOutcome.TRANSPORT_FAILURE)


class TestInlineWorker:
    """Test the synchronous worker."""

    def test_dispatch_and_drain_in_order(self):
        worker = InlineValidationWorker(lambda word: LookupOutcome.FOUND)
        worker.dispatch(Submission(0, "CAT"))
        worker.dispatch(Submission(1, "DOG"))

        assert worker.pending == 2
        verdicts = worker.drain()

        assert [v.word for v in verdicts] == ["CAT", "DOG"]
        assert worker.pending == 0
        assert worker.drain() == []


class TestValidationWorker:
    """Test the background worker thread."""

    def test_verdicts_in_submission_order(self):
        worker = ValidationWorker(
            lambda word: LookupOutcome.FOUND if word == "TREE" else LookupOutcome.NOT_FOUND
        )
        try:
            for i, word in enumerate(["TREE", "XQ", "BIRD"]):
                worker.dispatch(Submission(i, word))
            worker.wait()

            verdicts = worker.drain()
        finally:
            worker.close()

        assert [v.submission.submission_id for v in verdicts] == [0, 1, 2]
        assert [v.outcome for v in verdicts] == [
            LookupOutcome.FOUND, LookupOutcome.NOT_FOUND, LookupOutcome.NOT_FOUND
        ]
        assert worker.pending == 0

    def test_drain_does_not_block(self):
        """A slow lookup leaves drain() empty until it finishes."""
        release = threading.Event()

        def slow_lookup(word):
            release.wait(timeout=5.0)
            return LookupOutcome.FOUND

        worker = ValidationWorker(slow_lookup)
        try:
            worker.dispatch(Submission(0, "STAR"))

            assert worker.drain() == []
            assert worker.pending == 1

            release.set()
            worker.wait()
            verdicts = worker.drain()
        finally:
            worker.close()

        assert len(verdicts) == 1
        assert worker.pending == 0

    def test_crashing_lookup_reports_transport_failure(self):
        def broken_lookup(word):
            raise RuntimeError("boom")

        worker = ValidationWorker(broken_lookup)
        try:
            worker.dispatch(Submission(0, "FIRE"))
            worker.wait()
            verdicts = worker.drain()
        finally:
            worker.close()

        assert verdicts[0].outcome is LookupOutcome.TRANSPORT_FAILURE

    def test_close_is_idempotent(self):
        worker = ValidationWorker(lambda word: LookupOutcome.FOUND)
        worker.close()
        worker.start()
        worker.close()
        worker.close()
