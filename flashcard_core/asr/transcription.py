"""Listening for one finalized transcription from a speech recognizer."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


class TranscriptionError(RuntimeError):
    """The transcription source failed before producing an answer."""


@dataclass(frozen=True)
class Transcript:
    """One recognition candidate.

    Attributes:
        text: Best transcription so far
        is_final: True once the recognizer has finalized the utterance
    """
    text: str
    is_final: bool = False


class TranscriptionSource(Protocol):
    """Anything that streams recognition candidates for one utterance."""

    def candidates(self) -> AsyncIterator[Transcript]:
        ...


class ListeningSession:
    """Owns the wait for a single spoken answer.

    The answer is delivered through one future instead of a stored callback,
    so cancelling the session (child backs out mid-listen) leaves nothing
    behind that can fire later.

    Usage:
        session = ListeningSession(source)
        text = await session.wait(timeout=8.0)
    """

    def __init__(self, source: TranscriptionSource):
        self._source = source
        self._task: Optional[asyncio.Task] = None

    @property
    def started(self) -> bool:
        return self._task is not None

    def start(self) -> "asyncio.Future[str]":
        """Start consuming candidates on the running loop.

        Returns:
            Future resolving to the final text. Repeated calls return the
            same future.
        """
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    def cancel(self) -> bool:
        """Stop listening. Returns True if a pending listen was cancelled."""
        if self._task is None or self._task.done():
            return False
        logger.info("Listening cancelled before a final transcription")
        return self._task.cancel()

    async def wait(self, timeout: Optional[float] = None) -> str:
        """Await the answer; on timeout the session is cancelled.

        Raises:
            asyncio.TimeoutError: No final answer within ``timeout`` seconds
            asyncio.CancelledError: The session was cancelled
            TranscriptionError: The source failed
        """
        task = self.start()
        try:
            return await asyncio.wait_for(task, timeout)
        except asyncio.TimeoutError:
            logger.warning("No final transcription after %.1fs", timeout)
            raise

    async def _run(self) -> str:
        last_text = ""
        try:
            async for candidate in self._source.candidates():
                last_text = candidate.text
                if candidate.is_final:
                    logger.debug("Final transcription: %r", candidate.text)
                    return candidate.text
        except Exception as e:
            raise TranscriptionError(f"Transcription source failed: {e}") from e
        # Stream ended without a final candidate; "" means silence
        logger.debug("Transcription ended without final candidate, using %r", last_text)
        return last_text


class ScriptedTranscriptionSource:
    """In-memory source replaying partial transcriptions, then a final one."""

    def __init__(self, texts: Sequence[str], final: bool = True, delay: float = 0.0):
        self._texts: List[str] = list(texts)
        self._final = final
        self._delay = delay

    async def candidates(self) -> AsyncIterator[Transcript]:
        for index, text in enumerate(self._texts):
            if self._delay:
                await asyncio.sleep(self._delay)
            is_last = index == len(self._texts) - 1
            yield Transcript(text=text, is_final=self._final and is_last)
