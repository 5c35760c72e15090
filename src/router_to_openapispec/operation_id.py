"""Unique operationId allocation."""


class OperationIdAllocator:
    """Aliases operation names so each one is unique.

    "search" -> "search#0", "search#1", etc. Counters live on the instance,
    so each document generation should use its own allocator.
    """

    def __init__(self):
        self._counters: dict[str, int] = {}

    def allocate(self, name: str) -> str:
        count = self._counters.get(name, 0)
        self._counters[name] = count + 1
        return f"{name}#{count}"
