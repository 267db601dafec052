"""
Analysis Request Throttle

Client-side cooldown between analysis requests of one session.
Advisory pacing only - NOT a security control.

The state is stamped when a request is accepted, before it completes, so
calls made while a request is in flight are also blocked. A failed request
still consumes the window.
"""

import math
import time
from dataclasses import dataclass
from typing import Optional

COOLDOWN_MS = 30_000


@dataclass
class ThrottleState:
    """Per-session throttle state. None means never invoked."""

    last_invocation_ms: Optional[int] = None


@dataclass(frozen=True)
class ThrottleDecision:
    allowed: bool
    retry_after_seconds: int = 0


def now_ms() -> int:
    return int(time.time() * 1000)


class AnalysisRequestThrottle:
    """Fixed-window cooldown gate over an explicit ThrottleState."""

    def __init__(self, state: Optional[ThrottleState] = None, cooldown_ms: int = COOLDOWN_MS):
        self.state = state if state is not None else ThrottleState()
        self.cooldown_ms = cooldown_ms

    def try_acquire(self, now: Optional[int] = None) -> ThrottleDecision:
        """
        Allow and stamp, or deny with seconds left.
        State is not touched on denial.
        """
        if now is None:
            now = now_ms()

        last = self.state.last_invocation_ms
        if last is not None:
            elapsed = now - last
            if elapsed < self.cooldown_ms:
                retry_after = math.ceil((self.cooldown_ms - elapsed) / 1000)
                return ThrottleDecision(allowed=False, retry_after_seconds=retry_after)

        self.state.last_invocation_ms = now
        return ThrottleDecision(allowed=True)
