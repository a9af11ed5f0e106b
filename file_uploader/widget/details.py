import asyncio
from collections.abc import Callable

from file_uploader.backend.base import BaseEvaluationService
from file_uploader.logging.logger import Log
from file_uploader.widget.exceptions import RemoteCallError
from file_uploader.widget.models import DetailsLoadState
from file_uploader.widget.observable import Observable, Subscription

DETAILS_FALLBACK_MESSAGE = "Error fetching evaluation details"


class DetailsLoader:
    """Loads evaluation details for a record and tracks the load state.

    Two strategies share one state: ``load``/``reload`` fetch on demand, while
    ``bind`` re-fetches every time an observed record identifier changes.
    Only the most recent load may publish its result.
    """

    def __init__(self, service: BaseEvaluationService) -> None:
        self._service = service
        self.state = DetailsLoadState.loading()
        self._listeners: list[Callable[[DetailsLoadState], None]] = []
        self._generation = 0
        self._subscription: Subscription | None = None
        self._tasks: set[asyncio.Task[DetailsLoadState]] = set()
        self._disposed = False

    def on_change(self, callback: Callable[[DetailsLoadState], None]) -> None:
        self._listeners.append(callback)

    async def load(self, record_id: str | None) -> DetailsLoadState:
        """Fetch details for a record.

        A null response or a response without a candidate document is Empty,
        not an error. Remote failures become Failed with the server message.
        """
        self._generation += 1
        generation = self._generation
        if not record_id:
            Log.debug("No record id, skipping details fetch")
            self._publish(DetailsLoadState.empty())
            return self.state

        self._publish(DetailsLoadState.loading())
        Log.info(f"Fetching evaluation details for record {record_id}")
        try:
            details = await self._service.fetch_eval_details(record_id)
        except RemoteCallError as exc:
            Log.error(f"Error fetching details for record {record_id}: {exc}")
            result = DetailsLoadState.failed(exc.server_message or DETAILS_FALLBACK_MESSAGE)
        else:
            if details is None or details.candidate_doc is None:
                Log.info(f"No evaluation details for record {record_id}")
                result = DetailsLoadState.empty()
            else:
                result = DetailsLoadState.loaded(details)

        if self._disposed or generation != self._generation:
            Log.debug(f"Dropping superseded details result for record {record_id}")
            return result
        self._publish(result)
        return result

    async def reload(self, record_id: str | None) -> DetailsLoadState:
        return await self.load(record_id)

    def bind(self, record_id: Observable[str | None]) -> None:
        """Load for the current identifier and again on every change.

        Inside a running event loop each load is scheduled as a task. Outside
        one (an identifier set from plain synchronous code) the load runs to
        completion on a fresh loop before the call returns.
        """
        if self._subscription is not None:
            self._subscription.unsubscribe()
        self._subscription = record_id.subscribe(self._schedule)
        self._schedule(record_id.value)

    async def wait_idle(self) -> None:
        """Wait for every scheduled load to settle."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def activate(self) -> None:
        """Resume publishing after dispose, e.g. when the host mounts again."""
        self._disposed = False
        self._generation += 1

    def dispose(self) -> None:
        """Stop reacting to identifier changes; in-flight loads become no-ops."""
        self._disposed = True
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _schedule(self, record_id: str | None) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self.load(record_id))
            return
        task = loop.create_task(self.load(record_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _publish(self, state: DetailsLoadState) -> None:
        if self._disposed:
            return
        self.state = state
        for callback in list(self._listeners):
            callback(state)
