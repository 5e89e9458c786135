"""Incremental keyword search with cancellation of superseded queries."""

from __future__ import annotations

import asyncio
import contextlib
import inspect
from typing import Awaitable, Callable, Iterable, Protocol

from asciimoji.domain.models import Entry, SearchState
from asciimoji.logging import logger
from asciimoji.services.exceptions import ControllerStateError
from asciimoji.services.notifier import LogNotifier, Notifier, deliver_failure

FAILURE_TITLE = "Could not perform search"

StateObserver = Callable[[SearchState], None]


class KeywordSource(Protocol):
    def all_keywords(self) -> Iterable[str]: ...

    def render(self, keyword: str) -> str | Awaitable[str]: ...


def normalize_query(text: str) -> str:
    return text.strip().lower()


def match_keywords(query: str, keywords: Iterable[str]) -> tuple[str, ...]:
    """Keep keywords containing ``query``, in their original order.

    ``query`` must already be normalized; an empty query keeps everything.
    """

    return tuple(keyword for keyword in keywords if query in keyword)


class SearchController:
    """Turns query submissions into a totally ordered stream of ``SearchState``.

    Every submission bumps a generation counter and starts a new attempt on
    the running event loop, cancelling the previous one. An attempt may only
    publish while its generation is still the latest, so results from an
    older query can never overwrite those of a newer one even if the older
    attempt ignores cancellation.
    """

    def __init__(
        self,
        provider: KeywordSource,
        notifier: Notifier | None = None,
        *,
        delay_seconds: float = 0.0,
    ) -> None:
        self._provider = provider
        self._notifier = notifier or LogNotifier()
        self._delay_seconds = delay_seconds
        self._state = SearchState()
        self._observers: list[StateObserver] = []
        self._generation = 0
        self._task: asyncio.Task | None = None
        self._notifications: set[asyncio.Task] = set()
        self._initialized = False
        self._closed = False

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def closed(self) -> bool:
        return self._closed

    def on_state_change(self, observer: StateObserver) -> Callable[[], None]:
        """Register ``observer``; the returned callable unsubscribes it."""

        self._observers.append(observer)

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._observers.remove(observer)

        return unsubscribe

    def initialize(self) -> SearchState:
        if self._closed:
            raise ControllerStateError("Search controller has been torn down")
        if self._initialized:
            raise ControllerStateError("Search controller is already initialized")
        self._initialized = True
        self._publish(SearchState())
        self._start_attempt("")
        return self._state

    def submit_query(self, text: str) -> None:
        if self._closed:
            logger.debug("search_ignored_after_teardown", query=text)
            return
        if not self._initialized:
            raise ControllerStateError("initialize() must be called before submit_query()")
        self._cancel_inflight()
        self._publish(self._state.loading())
        self._start_attempt(text)

    def teardown(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._cancel_inflight()
        self._observers.clear()
        logger.debug("search_controller_closed", generation=self._generation)

    async def settle(self) -> None:
        """Wait until the latest attempt and pending failure notices are done."""

        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        if self._notifications:
            await asyncio.wait(set(self._notifications))

    def _cancel_inflight(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    def _start_attempt(self, text: str) -> None:
        self._generation += 1
        generation = self._generation
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(
            self._run_attempt(generation, text), name=f"asciimoji-search-{generation}"
        )

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    async def _run_attempt(self, generation: int, text: str) -> None:
        query = normalize_query(text)
        log = logger.bind(generation=generation, query=query)
        log.debug("search_started")
        try:
            if self._delay_seconds > 0:
                await asyncio.sleep(self._delay_seconds)
            results = await self._perform_search(query)
        except asyncio.CancelledError:
            log.debug("search_cancelled")
            raise
        except Exception as exc:
            if not self._is_current(generation):
                log.debug("search_failure_discarded", error=str(exc))
                return
            log.warning("search_failed", error_type=exc.__class__.__name__, error=str(exc))
            self._publish(self._state.ready())
            self._schedule_failure_notice(generation, str(exc))
            return

        if not self._is_current(generation):
            log.debug("search_result_discarded", matches=len(results))
            return
        self._publish(self._state.ready(results))
        log.debug("search_completed", matches=len(results))

    def _schedule_failure_notice(self, generation: int, message: str) -> None:
        # runs outside the attempt so a newer query cannot cancel it
        task = asyncio.get_running_loop().create_task(
            deliver_failure(self._notifier, FAILURE_TITLE, message),
            name=f"asciimoji-failure-{generation}",
        )
        self._notifications.add(task)
        task.add_done_callback(self._notifications.discard)

    async def _perform_search(self, query: str) -> tuple[Entry, ...]:
        keywords = match_keywords(query, self._provider.all_keywords())
        results: list[Entry] = []
        for keyword in keywords:
            rendered = self._provider.render(keyword)
            if inspect.isawaitable(rendered):
                rendered = await rendered
            results.append(Entry(keyword=keyword, rendered_text=rendered))
        return tuple(results)

    def _publish(self, state: SearchState) -> None:
        if self._closed:
            return
        self._state = state
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                logger.exception("state_observer_failed", observer=repr(observer))


__all__ = [
    "FAILURE_TITLE",
    "KeywordSource",
    "SearchController",
    "StateObserver",
    "match_keywords",
    "normalize_query",
]
