from __future__ import annotations

import pytest

from quiz_core.scoring import (
    calculate_alignment_scores,
    calculate_combined_scores,
    calculate_results,
    score_answers,
)
from quiz_core.traits import BIG5_ALIGNMENTS, HOLLAND_ALIGNMENTS

from tests.conftest import build_answers_for_type, make_answer


@pytest.mark.parametrize("holland", HOLLAND_ALIGNMENTS)
@pytest.mark.parametrize("big5", BIG5_ALIGNMENTS)
def test_every_type_is_reachable(holland, big5):
    assert calculate_results(build_answers_for_type(holland, big5)) == f"{holland}_{big5}"


def test_maximum_scores_for_a_type():
    scores = calculate_alignment_scores(build_answers_for_type("Artistic", "Openness"))
    assert scores["Artistic"] == 24
    assert scores["Openness"] == 46
    assert calculate_combined_scores(scores)["Artistic_Openness"] == 24 * 46


def test_empty_answers_give_no_result():
    assert calculate_results([]) == ""
    res = score_answers([])
    assert res.personality_type_id is None
    assert not res.has_result
    assert res.top_score == 0


def test_tie_goes_to_earlier_holland():
    answers = [
        make_answer("t1", "Investigative"),
        make_answer("t2", "Artistic"),
        make_answer("t3", "Openness"),
    ]
    scores = calculate_alignment_scores(answers)
    assert scores["Investigative"] == scores["Artistic"] == scores["Openness"] == 3
    assert calculate_results(answers) == "Investigative_Openness"


def test_tie_goes_to_earlier_big5_within_holland():
    answers = [
        make_answer("t1", "Social"),
        make_answer("t2", "Agreeableness"),
        make_answer("t3", "Conscientiousness"),
    ]
    assert calculate_results(answers) == "Social_Conscientiousness"


def test_holland_only_signal_gives_no_result():
    answers = [make_answer(f"h{i}", "Realistic", "Artistic") for i in range(6)]
    assert calculate_results(answers) == ""


def test_all_negative_signal_gives_no_result():
    answers = [
        make_answer("h1", "Investigative"),
        make_answer("b1", "Neuroticism"),
        make_answer("b2", "Low Agreeableness"),
    ]
    res = score_answers(answers)
    assert max(res.combined_scores.values()) == 0
    assert calculate_results(answers) == ""


def test_single_focus():
    answers = [make_answer(f"h{i}", "Artistic", "Artistic") for i in range(6)]
    answers += [make_answer(f"b{i}", "Openness") for i in range(14)]
    res = score_answers(answers)
    assert res.trait_scores["Artistic"] == 24
    assert res.trait_scores["Openness"] == 42
    assert res.personality_type_id == "Artistic_Openness"
    assert res.top_score == 24 * 42


def test_same_answers_same_result():
    answers = build_answers_for_type("Social", "Agreeableness")
    for _ in range(10):
        assert calculate_results(answers) == "Social_Agreeableness"


def test_stronger_holland_dominates():
    answers = [make_answer(f"h{i}", "Artistic") for i in range(5)]
    answers.append(make_answer("h5", "Realistic"))
    answers += [make_answer(f"b{i}", "Openness") for i in range(10)]
    scores = calculate_alignment_scores(answers)
    assert scores["Artistic"] > scores["Realistic"]
    assert calculate_results(answers) == "Artistic_Openness"


def test_stronger_big5_dominates():
    answers = [make_answer(f"h{i}", "Enterprising") for i in range(3)]
    answers += [make_answer(f"b{i}", "Extraversion", "Conscientiousness") for i in range(4)]
    answers.append(make_answer("b9", "Conscientiousness"))
    scores = calculate_alignment_scores(answers)
    assert scores["Extraversion"] == 12
    assert scores["Conscientiousness"] == 7
    assert calculate_results(answers) == "Enterprising_Extraversion"


def test_mixed_answers():
    holland = ["Investigative", "Investigative", "Investigative", "Artistic", "Social", "Conventional"]
    big5 = [
        "Conscientiousness", "Conscientiousness", "Conscientiousness",
        "Openness", "Extraversion", "Agreeableness",
        "Conscientiousness", "Openness", "Emotional-Stability", "Agreeableness",
    ]
    answers = [make_answer(f"h{i}", h) for i, h in enumerate(holland)]
    answers += [make_answer(f"b{i}", b) for i, b in enumerate(big5)]
    scores = calculate_alignment_scores(answers)
    assert scores["Investigative"] == 9
    assert scores["Conscientiousness"] == 12
    assert calculate_results(answers) == "Investigative_Conscientiousness"


def test_negative_big5_cannot_win_over_positive():
    answers = [
        make_answer("h1", "Social"),
        make_answer("b1", "Openness", "Neuroticism"),
        make_answer("b2", "Neuroticism"),
    ]
    res = score_answers(answers)
    assert res.trait_scores["Emotional-Stability"] == -4
    assert res.personality_type_id == "Social_Openness"
