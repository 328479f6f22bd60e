import asyncio


class CountdownLatch:
    """Single-use latch released once ``count_down`` has been called ``count`` times

    Lives on one event loop; no locking needed.
    """

    def __init__(self, count: int):
        if count < 0:
            raise ValueError("count must be non-negative")
        self.remaining = count
        self._released = asyncio.Event()
        if count == 0:
            self._released.set()

    def count_down(self):
        """Record one signal; extra calls after release are ignored"""
        if self.remaining == 0:
            return
        self.remaining -= 1
        if self.remaining == 0:
            self._released.set()

    @property
    def released(self) -> bool:
        return self._released.is_set()

    async def wait(self, timeout: float = None) -> bool:
        """Wait for release or timeout

        Returns:
            bool: True if released, False if the timeout elapsed first
        """
        try:
            await asyncio.wait_for(self._released.wait(), timeout)
            return True
        except asyncio.TimeoutError:
            return False
