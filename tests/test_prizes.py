import pytest

from game.prizes import GRAND_PRIZE, LEVEL_COUNT, PRIZES, fireproof_prize, prize_for_level


def test_prize_table_is_strictly_increasing() -> None:
    assert len(PRIZES) == LEVEL_COUNT
    assert all(low < high for low, high in zip(PRIZES, PRIZES[1:]))
    assert GRAND_PRIZE == 1000000


def test_prize_for_level() -> None:
    assert prize_for_level(-1) == 0
    assert prize_for_level(0) == 100
    assert prize_for_level(1) == 200
    assert prize_for_level(LEVEL_COUNT - 1) == GRAND_PRIZE


@pytest.mark.parametrize(
    "answered_level, expected",
    [
        (-1, 0),
        (0, 0),
        (3, 0),
        (4, PRIZES[4]),
        (8, PRIZES[4]),
        (9, PRIZES[9]),
        (13, PRIZES[9]),
        (14, PRIZES[14]),
    ],
)
def test_fireproof_prize(answered_level: int, expected: int) -> None:
    assert fireproof_prize(answered_level, (4, 9, 14)) == expected


def test_fireproof_prize_without_fireproof_levels() -> None:
    assert fireproof_prize(12, ()) == 0


def test_fireproof_prize_uses_configured_levels(monkeypatch: pytest.MonkeyPatch) -> None:
    import config

    monkeypatch.setattr(config.config, "FIREPROOF_LEVELS", (2,))
    assert fireproof_prize(6) == PRIZES[2]
