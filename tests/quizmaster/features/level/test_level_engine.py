import pytest

from quizmaster.exceptions.domain import DomainError
from quizmaster.features.level.engine import (
    Difficulty,
    LevelInfo,
    cumulative_xp_for_level,
    difficulty_multiplier,
    level_info_from_total_xp,
    levels_gained,
    xp_award_for_quiz,
    xp_required_for_level,
)

# --------------------------
# xp_required_for_level
# --------------------------

def test_xp_required_for_level_known_values():
    assert xp_required_for_level(1) == 100
    assert xp_required_for_level(2) == 214  # floor(100 * 2 ** 1.1) = floor(214.35...)
    assert xp_required_for_level(3) == 334


def test_xp_required_for_level_is_non_decreasing_and_never_below_base():
    previous = 0
    for level in range(1, 1001):
        required = xp_required_for_level(level)
        assert required >= previous
        assert required >= 100
        previous = required


@pytest.mark.parametrize("bad", [0, -1, 1.5, "2", None, True])
def test_xp_required_for_level_rejects_out_of_domain(bad):
    with pytest.raises(DomainError):
        xp_required_for_level(bad)


# --------------------------
# cumulative_xp_for_level
# --------------------------

def test_cumulative_xp_for_level_start_values():
    assert cumulative_xp_for_level(1) == 0
    assert cumulative_xp_for_level(2) == 100
    assert cumulative_xp_for_level(3) == 314


def test_cumulative_xp_for_level_recurrence():
    for n in range(1, 300):
        assert cumulative_xp_for_level(n + 1) == cumulative_xp_for_level(n) + xp_required_for_level(n)


def test_cumulative_xp_for_level_rejects_level_zero():
    with pytest.raises(DomainError):
        cumulative_xp_for_level(0)


# --------------------------
# level_info_from_total_xp
# --------------------------

def test_level_info_zero_xp():
    assert level_info_from_total_xp(0) == LevelInfo(
        level=1,
        xp_in_level=0,
        xp_for_next_level=100,
        progress=0,
        total_xp=0,
    )


def test_level_info_exact_thresholds():
    info = level_info_from_total_xp(100)
    assert (info.level, info.xp_in_level, info.xp_for_next_level) == (2, 0, 214)

    info = level_info_from_total_xp(313)
    assert (info.level, info.xp_in_level, info.xp_for_next_level) == (2, 213, 214)

    info = level_info_from_total_xp(314)
    assert (info.level, info.xp_in_level, info.xp_for_next_level) == (3, 0, 334)


def test_level_info_progress_is_percentage_of_current_level():
    info = level_info_from_total_xp(50)
    assert info.progress == pytest.approx(50.0)

    info = level_info_from_total_xp(100 + 107)
    assert info.progress == pytest.approx(50.0)
    assert 0 <= info.progress < 100


def _assert_decomposition(total_xp: int) -> None:
    info = level_info_from_total_xp(total_xp)
    assert info.total_xp == total_xp
    assert info.level >= 1
    assert 0 <= info.xp_in_level < info.xp_for_next_level
    assert info.xp_for_next_level == xp_required_for_level(info.level)
    assert cumulative_xp_for_level(info.level) + info.xp_in_level == total_xp
    assert 0 <= info.progress < 100


def test_level_info_decomposition_over_swept_range():
    for total_xp in range(0, 10_000_001, 9_973):
        _assert_decomposition(total_xp)
    _assert_decomposition(10_000_000)


def test_level_info_decomposition_around_each_threshold():
    for level in range(2, 80):
        start = cumulative_xp_for_level(level)
        for total_xp in (start - 1, start, start + 1):
            _assert_decomposition(total_xp)
        assert level_info_from_total_xp(start).level == level
        assert level_info_from_total_xp(start - 1).level == level - 1


def test_level_info_terminates_for_large_xp_within_bound():
    # Chaque seuil >= 100 : au plus total_xp // 100 passages de niveau.
    total_xp = 1_000_000_000
    info = level_info_from_total_xp(total_xp)
    assert 1 <= info.level <= total_xp // 100 + 1
    assert cumulative_xp_for_level(info.level) + info.xp_in_level == total_xp


def test_level_info_is_referentially_transparent():
    first = level_info_from_total_xp(123_456)
    second = level_info_from_total_xp(123_456)
    assert first == second
    assert first is not second


def test_level_info_is_immutable():
    info = level_info_from_total_xp(10)
    with pytest.raises(AttributeError):
        info.level = 99  # type: ignore[misc]


@pytest.mark.parametrize("bad", [-1, -1000, 1.0, "10", None, False])
def test_level_info_rejects_out_of_domain(bad):
    with pytest.raises(DomainError):
        level_info_from_total_xp(bad)


def test_domain_error_is_also_value_error():
    with pytest.raises(ValueError):
        level_info_from_total_xp(-5)


# --------------------------
# levels_gained
# --------------------------

def test_levels_gained():
    assert levels_gained(0, 99) == []
    assert levels_gained(0, 100) == [2]
    assert levels_gained(0, 314) == [2, 3]
    assert levels_gained(150, 160) == []
    assert levels_gained(314, 314) == []


# --------------------------
# xp_award_for_quiz
# --------------------------

def test_xp_award_reference_examples():
    assert xp_award_for_quiz(5, 5, "Medium") == 75
    assert xp_award_for_quiz(0, 10, "Hard") == 0
    assert xp_award_for_quiz(3, 5, "Easy") == 30


def test_xp_award_accepts_enum_and_plain_strings():
    assert xp_award_for_quiz(4, 4, Difficulty.HARD) == xp_award_for_quiz(4, 4, "Hard") == 80
    assert xp_award_for_quiz(1, 1, Difficulty.MEDIUM) == 15


def test_xp_award_ignores_total_questions():
    # Comportement actuel : seule la quantité de bonnes réponses compte, pas le taux de réussite.
    assert xp_award_for_quiz(3, 5, "Hard") == xp_award_for_quiz(3, 100, "Hard") == 60
    assert xp_award_for_quiz(3, 0, "Easy") == 30


def test_xp_award_unknown_difficulty_falls_back_to_multiplier_one():
    assert difficulty_multiplier("Nightmare") == 1
    assert xp_award_for_quiz(3, 5, "Nightmare") == 30
    assert xp_award_for_quiz(3, 5, "medium") == 30  # clé sensible à la casse


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_xp_award_is_monotonic_in_correct_count(difficulty):
    awards = [xp_award_for_quiz(correct, 200, difficulty) for correct in range(0, 201)]
    assert awards == sorted(awards)
    assert awards[0] == 0


@pytest.mark.parametrize(
    "correct, total",
    [(-1, 5), (1, -5), (1.5, 5), (True, 5)],
)
def test_xp_award_rejects_out_of_domain_counts(correct, total):
    with pytest.raises(DomainError):
        xp_award_for_quiz(correct, total, "Easy")
