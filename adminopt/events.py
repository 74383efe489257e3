from typing import Any, Callable, Dict, List

from adminopt.domain import Record

__all__ = ['ACTIVITY_TRACKED', 'EXPENSE_ADDED', 'INVOICE_CREATED', 'EVENT_KINDS', 'EventBus', 'UnknownEventError']

ACTIVITY_TRACKED = "ACTIVITY_TRACKED"
EXPENSE_ADDED = "EXPENSE_ADDED"
INVOICE_CREATED = "INVOICE_CREATED"

EVENT_KINDS = (ACTIVITY_TRACKED, EXPENSE_ADDED, INVOICE_CREATED)

Handler = Callable[[Record], Any]


class UnknownEventError(ValueError):
    pass


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Handler]] = {kind: [] for kind in EVENT_KINDS}

    def _handlers(self, name: str) -> List[Handler]:
        if name not in self._subscribers:
            raise UnknownEventError(f"unknown event kind: {name!r}")
        return self._subscribers[name]

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers(name).append(handler)

    def publish(self, name: str, record: Record) -> List[Any]:
        # handlers run in registration order; their exceptions propagate
        results = []
        for handler in list(self._handlers(name)):
            results.append(handler(record))
        return results

    def unsubscribe(self, name: str, handler: Handler) -> None:
        handlers = self._handlers(name)
        if handler in handlers:
            handlers.remove(handler)

    def subscriber_count(self, name: str) -> int:
        return len(self._handlers(name))
