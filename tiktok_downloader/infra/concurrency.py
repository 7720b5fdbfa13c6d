from fastapi import Request
from tiktok_downloader.config.settings import config
from tiktok_downloader.core.state import state

class ConcurrencyLimiter:
    """
    Cap on relay transfers in flight in this process.
    Requests run on one event loop, so a plain counter is enough.
    """

    def try_acquire(self, request: Request) -> bool:
        if state.active_relays >= config.relay.max_concurrent:
            return False

        state.active_relays += 1
        request.state.relay_slot_acquired = True
        return True

    def release(self, request: Request) -> None:
        """Release the slot held by this request, if any"""
        if not getattr(request.state, "relay_slot_acquired", False):
            return

        request.state.relay_slot_acquired = False
        state.active_relays = max(0, state.active_relays - 1)

concurrency_limiter = ConcurrencyLimiter()
