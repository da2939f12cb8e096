# src/uplugin_builder/core/event_bus.py
import asyncio
import inspect
import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventBus:
    """A simple, in-process event bus for decoupling components, with async support."""

    def __init__(self):
        self._subscribers = defaultdict(list)
        self._pending_tasks: set[asyncio.Task] = set()

    def subscribe(self, event_name: str, callback):
        logger.debug(f"Subscribing '{getattr(callback, '__name__', 'lambda')}' to event '{event_name}'")
        self._subscribers[event_name].append(callback)

    def emit(self, event_name: str, *args, **kwargs):
        """
        Emits an event, calling all subscribed callbacks with the given arguments.
        Coroutine callbacks are scheduled on the running loop; plain callbacks run inline.
        A failing subscriber is logged and does not stop the others.
        """
        for callback in list(self._subscribers.get(event_name, [])):
            try:
                if inspect.iscoroutinefunction(callback):
                    task = asyncio.create_task(callback(*args, **kwargs))
                    self._pending_tasks.add(task)
                    task.add_done_callback(lambda t, name=event_name: self._on_task_done(name, t))
                else:
                    callback(*args, **kwargs)
            except Exception:
                logger.exception(f"Error in callback for event '{event_name}'")

    def _on_task_done(self, event_name: str, task: asyncio.Task):
        self._pending_tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                f"Error in async callback for event '{event_name}'",
                exc_info=(type(error), error, error.__traceback__)
            )
