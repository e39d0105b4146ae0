import pytest

from utils.retry import retry_with_backoff


def test_retry_succeeds_after_failures() -> None:
    calls = []
    delays = []

    @retry_with_backoff(max_attempts=3, base_delay=0.5, exceptions=(ConnectionError,), sleep=delays.append)
    def flaky() -> str:
        calls.append(1)
        if len(calls) < 3:
            raise ConnectionError("down")
        return "ok"

    assert flaky() == "ok"
    assert len(calls) == 3
    assert delays == [0.5, 1.0]


def test_retry_gives_up_after_max_attempts() -> None:
    delays = []

    @retry_with_backoff(max_attempts=2, base_delay=1.0, exceptions=(ConnectionError,), sleep=delays.append)
    def broken() -> None:
        raise ConnectionError("down")

    with pytest.raises(ConnectionError):
        broken()
    assert delays == [1.0]


def test_retry_does_not_catch_other_errors() -> None:
    delays = []

    @retry_with_backoff(max_attempts=5, exceptions=(ConnectionError,), sleep=delays.append)
    def wrong() -> None:
        raise ValueError("bad input")

    with pytest.raises(ValueError):
        wrong()
    assert delays == []
