# file: tests/test_throttle.py
from tradejournal.client.throttle import AnalysisRequestThrottle, ThrottleState

T0 = 1_700_000_000_000


def test_first_call_is_always_allowed():
    throttle = AnalysisRequestThrottle()

    decision = throttle.try_acquire(T0)

    assert decision.allowed is True
    assert throttle.state.last_invocation_ms == T0


def test_call_just_inside_window_is_denied_with_one_second():
    throttle = AnalysisRequestThrottle()
    throttle.try_acquire(T0)

    decision = throttle.try_acquire(T0 + 29_999)

    assert decision.allowed is False
    assert decision.retry_after_seconds == 1


def test_call_at_window_edge_is_allowed():
    throttle = AnalysisRequestThrottle()
    throttle.try_acquire(T0)

    assert throttle.try_acquire(T0 + 30_000).allowed is True
    assert throttle.state.last_invocation_ms == T0 + 30_000


def test_denial_does_not_move_the_window():
    throttle = AnalysisRequestThrottle()
    throttle.try_acquire(T0)

    first = throttle.try_acquire(T0 + 1_000)
    second = throttle.try_acquire(T0 + 10_500)

    assert first.retry_after_seconds == 29
    assert second.retry_after_seconds == 20
    assert throttle.state.last_invocation_ms == T0


def test_state_is_explicit_and_per_session():
    shared = ThrottleState(last_invocation_ms=T0)
    session_a = AnalysisRequestThrottle(shared)
    session_b = AnalysisRequestThrottle()

    assert session_a.try_acquire(T0 + 5_000).allowed is False
    assert session_b.try_acquire(T0 + 5_000).allowed is True
