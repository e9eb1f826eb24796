import asyncio
from contextlib import asynccontextmanager

from movie_catalog.domain.exceptions import SubmissionInProgressError


class SubmissionGate:
    """Lets at most one submission through at a time; later ones are rejected, not queued."""

    def __init__(self, name: str = "submission"):
        self.name = name
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def hold(self):
        if self._lock.locked():
            raise SubmissionInProgressError(f"A {self.name} is already in progress")
        async with self._lock:
            yield
