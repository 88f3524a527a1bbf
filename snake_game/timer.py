"""Fixed-interval tick gate, independent of the frame rate."""


class TickTimer:
    def __init__(self, interval_ms, start_ms=0):
        self.interval_ms = interval_ms
        self.last_tick_ms = start_ms

    def ready(self, now_ms):
        """True at most once per interval; a late frame does not queue extra ticks."""
        if now_ms - self.last_tick_ms >= self.interval_ms:
            self.last_tick_ms = now_ms
            return True
        return False

    def reset(self, now_ms):
        self.last_tick_ms = now_ms
