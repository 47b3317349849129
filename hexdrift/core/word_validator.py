"""
Word Validator
==============

Dictionary lookups over HTTP, run off the frame loop.

The lookup only reports what the dictionary said (or that it could not be
reached). Turning that into a verdict, including the local fallback list, is
done by hexdrift.core.rules.WordRules on the game thread.
"""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

import requests

from hexdrift.core.config_loader import GameConfig, get_config
from hexdrift.core.tiles import Tile

logger = logging.getLogger(__name__)


class LookupOutcome(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass
class Submission:
    """A submitted word with the tiles that spelled it."""
    submission_id: int
    word: str
    tiles: Tuple[Tile, ...] = field(default_factory=tuple)


@dataclass
class WordVerdict:
    """Lookup result for one submission."""
    submission: Submission
    outcome: LookupOutcome

    @property
    def word(self) -> str:
        return self.submission.word


class DictionaryLookup:
    """
    Asks the online dictionary whether a word exists.

    Any 2xx response means the word exists. Other statuses are a negative
    answer. Timeouts and connection errors are reported, not raised.
    """

    def __init__(self, config: Optional[GameConfig] = None, session: Optional[requests.Session] = None):
        if config is None:
            config = get_config()

        self._url_template = config.validator.url_template
        self._timeout = config.validator.timeout_seconds
        self._session = session

    def url_for(self, word: str) -> str:
        return self._url_template.format(word=word.lower())

    def __call__(self, word: str) -> LookupOutcome:
        url = self.url_for(word)
        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(url, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("Dictionary lookup failed for %s: %s", word, e)
            return LookupOutcome.TRANSPORT_FAILURE

        if response.ok:
            return LookupOutcome.FOUND
        logger.debug("Dictionary returned %s for %s", response.status_code, word)
        return LookupOutcome.NOT_FOUND


Lookup = Callable[[str], LookupOutcome]


class ValidationWorker:
    """
    Background thread resolving submissions one at a time.

    Submissions are looked up in the order they were dispatched and verdicts
    come back in that order. drain() never blocks, so the frame loop keeps
    running while a lookup is in flight.
    """

    def __init__(self, lookup: Lookup):
        self._lookup = lookup
        self._requests: queue.Queue = queue.Queue()
        self._results: queue.Queue = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._pending = 0

    @property
    def pending(self) -> int:
        """Submissions dispatched but not yet drained."""
        return self._pending

    def start(self) -> None:
        """Start the worker thread (idempotent)."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()

    def dispatch(self, submission: Submission) -> None:
        self.start()
        self._pending += 1
        self._requests.put(submission)

    def drain(self) -> List[WordVerdict]:
        """Collect every finished verdict without waiting."""
        verdicts = []
        try:
            while True:
                verdicts.append(self._results.get_nowait())
        except queue.Empty:
            pass
        self._pending -= len(verdicts)
        return verdicts

    def wait(self) -> None:
        """Block until every dispatched submission has a verdict."""
        self._requests.join()

    def _run_loop(self) -> None:
        """Main worker loop (runs in background thread)."""
        while True:
            submission = self._requests.get()
            if submission is None:
                self._requests.task_done()
                break
            try:
                outcome = self._lookup(submission.word)
            except Exception:
                logger.exception("Word lookup crashed for %s", submission.word)
                outcome = LookupOutcome.TRANSPORT_FAILURE
            self._results.put(WordVerdict(submission, outcome))
            self._requests.task_done()

    def close(self) -> None:
        """Stop the worker thread."""
        if self._thread is None:
            return
        self._requests.put(None)
        self._thread.join(timeout=2.0)
        self._thread = None


class InlineValidationWorker:
    """
    Resolves submissions synchronously on dispatch.

    Same interface as ValidationWorker, for headless runs and tests where a
    lookup is known to be immediate.
    """

    def __init__(self, lookup: Lookup):
        self._lookup = lookup
        self._results: List[WordVerdict] = []

    @property
    def pending(self) -> int:
        return len(self._results)

    def dispatch(self, submission: Submission) -> None:
        self._results.append(WordVerdict(submission, self._lookup(submission.word)))

    def drain(self) -> List[WordVerdict]:
        verdicts, self._results = self._results, []
        return verdicts

    def wait(self) -> None:
        pass

    def close(self) -> None:
        pass
