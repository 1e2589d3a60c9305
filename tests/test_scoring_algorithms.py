"""Tests for the per-type scoring algorithms and the registry."""
import pytest

from career_guidance.models.enums import AssessmentType
from career_guidance.scoring.algorithms import (
    CategoryScore,
    score_aptitude,
    score_career_values,
    score_generic,
    score_interest,
    score_learning_style,
    score_personality,
    score_skill,
)
from career_guidance.scoring.lexicon import PROFICIENCY_SCALE, IMPORTANCE_SCALE
from career_guidance.scoring.registry import ScoringRegistry
from conftest import make_response

PROFICIENCY = tuple(PROFICIENCY_SCALE)
IMPORTANCE = tuple(IMPORTANCE_SCALE)
PERSONALITY_OPTIONS = ("Lead", "Listen", "Adapt", "One-on-one", "Large groups")


class TestAptitude:
    """Lexicon-based ordinal scoring."""

    def test_worked_example(self, aptitude_responses):
        result = score_aptitude(aptitude_responses)
        assert result.overall_score == 7
        assert result.percentage == pytest.approx(70.0)
        assert result.to_dict() == {
            "overallScore": 7.0,
            "percentage": pytest.approx(70.0),
            "categoryScores": {
                "Logical-Mathematical": {
                    "score": 5.0, "maxScore": 5.0, "percentage": pytest.approx(100.0), "count": 1,
                },
                "Creative": {
                    "score": 2.0, "maxScore": 5.0, "percentage": pytest.approx(40.0), "count": 1,
                },
            },
        }

    def test_categories_accumulate(self):
        result = score_aptitude([
            make_response("Analytical", "Agree"),
            make_response("Analytical", "Neutral"),
        ])
        cs = result.category_scores["Analytical"]
        assert cs.score == 7
        assert cs.max_score == 10
        assert cs.count == 2
        assert cs.percentage == pytest.approx(70.0)

    def test_weights_scale_score_and_max(self):
        result = score_aptitude([
            make_response("Spatial", "Strongly Agree", weight=1.2),
            make_response("Musical", "Disagree", weight=1.0),
        ])
        assert result.overall_score == pytest.approx(8.0)
        assert result.percentage == pytest.approx(8.0 / 11.0 * 100)
        assert result.category_scores["Spatial"].max_score == pytest.approx(6.0)

    def test_unknown_answer_scores_middle_ordinal(self):
        result = score_aptitude([make_response("Spatial", "Sometimes")])
        assert result.overall_score == 3
        assert result.percentage == pytest.approx(60.0)

    def test_custom_lexicon(self):
        result = score_aptitude(
            [make_response("Spatial", "Yes")],
            lexicon={"Yes": 5, "No": 1},
        )
        assert result.percentage == pytest.approx(100.0)

    def test_empty_responses(self):
        result = score_aptitude([])
        assert result.overall_score == 0
        assert result.percentage == 0.0
        assert result.category_scores == {}


class TestSkill:
    """Proficiency scoring with level labels."""

    def test_average_and_level(self):
        result = score_skill([
            make_response("Communication", "Expert", options=PROFICIENCY),
            make_response("Communication", "Advanced", options=PROFICIENCY),
            make_response("Financial", "No experience", options=PROFICIENCY),
        ])
        communication = result.category_scores["Communication"]
        assert communication.average_score == pytest.approx(4.5)
        assert communication.level == "Advanced"
        financial = result.category_scores["Financial"]
        assert financial.average_score == pytest.approx(1.0)
        assert financial.level == "No experience"

    @pytest.mark.parametrize(
        "answer, level",
        [
            ("Expert", "Advanced"),
            ("Advanced", "Advanced"),
            ("Intermediate", "Intermediate"),
            ("Beginner", "Beginner"),
            ("No experience", "No experience"),
        ],
    )
    def test_level_thresholds(self, answer, level):
        result = score_skill([make_response("Technical", answer, options=PROFICIENCY)])
        assert result.category_scores["Technical"].level == level

    def test_wire_shape_includes_skill_fields(self):
        result = score_skill([make_response("Research", "Intermediate", options=PROFICIENCY)])
        wire = result.to_dict()["categoryScores"]["Research"]
        assert wire["averageScore"] == pytest.approx(3.0)
        assert wire["level"] == "Intermediate"
        assert "importance" not in wire


class TestCareerValues:
    """Importance scoring."""

    def test_importance_is_latest_answer(self):
        result = score_career_values([
            make_response("Financial", "Not Important", options=IMPORTANCE),
            make_response("Financial", "Very Important", options=IMPORTANCE),
        ])
        cs = result.category_scores["Financial"]
        assert cs.importance == "Very Important"
        assert cs.score == 5
        assert cs.percentage == pytest.approx(50.0)


class TestPersonality:
    """Option-position scoring."""

    def test_score_is_option_position(self):
        result = score_personality([
            make_response("Social Style", "Adapt", options=PERSONALITY_OPTIONS),
        ])
        assert result.overall_score == 3
        assert result.percentage == pytest.approx(60.0)

    def test_option_order_changes_score(self):
        reordered = tuple(reversed(PERSONALITY_OPTIONS))
        first = score_personality([make_response("Team Role", "Lead", options=PERSONALITY_OPTIONS)])
        second = score_personality([make_response("Team Role", "Lead", options=reordered)])
        assert first.overall_score == 1
        assert second.overall_score == 5

    def test_weight_applies(self):
        result = score_personality([
            make_response("Decision Making", "One-on-one", weight=1.1, options=PERSONALITY_OPTIONS),
        ])
        assert result.overall_score == pytest.approx(4.4)

    def test_dominant_response_is_first_answer(self):
        result = score_personality([
            make_response("Motivation", "Listen", options=PERSONALITY_OPTIONS),
            make_response("Motivation", "Lead", options=PERSONALITY_OPTIONS),
            make_response("Motivation", "Lead", options=PERSONALITY_OPTIONS),
        ])
        assert result.category_scores["Motivation"].dominant_response == "Listen"

    def test_wire_shape_omits_max_and_count(self):
        result = score_personality([make_response("Work Style", "Lead", options=PERSONALITY_OPTIONS)])
        wire = result.to_dict()["categoryScores"]["Work Style"]
        assert set(wire) == {"score", "percentage", "dominantResponse"}

    def test_answer_outside_options_scores_middle(self):
        result = score_personality([make_response("Work Style", "Other", options=PERSONALITY_OPTIONS)])
        assert result.overall_score == 3

    def test_position_capped_at_five(self):
        options = ("a", "b", "c", "d", "e", "f")
        result = score_personality([make_response("Work Style", "f", options=options)])
        assert result.overall_score == 5
        assert result.percentage == pytest.approx(100.0)


class TestInterest:
    """Weight tallies per answer."""

    def _responses(self):
        # total weight 6.2 against an assumed maximum of 5 × 1.2 = 6.0
        return [
            make_response("Primary Interest", "Research", weight=2.0),
            make_response("Career Field", "Research", weight=1.5),
            make_response("Work Style", "Teaching", weight=1.2),
            make_response("Motivation", "Design", weight=1.0),
            make_response("Problem Solving", "Business", weight=0.5),
        ]

    def test_top_three_answers(self):
        result = score_interest(self._responses())
        assert list(result.category_scores) == ["Research", "Teaching", "Design"]
        assert result.category_scores["Research"].score == pytest.approx(3.5)
        assert result.category_scores["Research"].percentage == pytest.approx(3.5 / 6.2 * 100)

    def test_overall_percentage_can_exceed_100(self):
        result = score_interest(self._responses())
        assert result.overall_score == pytest.approx(6.2)
        assert result.percentage == pytest.approx(6.2 / 6.0 * 100)
        assert result.percentage > 100

    def test_template_weights_stay_within_100(self):
        responses = [
            make_response("Primary Interest", "Research", weight=1.2),
            make_response("Career Field", "Research", weight=1.0),
            make_response("Work Style", "Teaching", weight=1.0),
            make_response("Motivation", "Design", weight=1.0),
            make_response("Problem Solving", "Business", weight=1.0),
        ]
        result = score_interest(responses)
        assert result.overall_score == pytest.approx(5.2)
        assert result.percentage == pytest.approx(5.2 / 6.0 * 100)
        assert result.category_scores["Research"].percentage == pytest.approx(2.2 / 5.2 * 100)

    def test_categories_only_carry_score_and_percentage(self):
        result = score_interest(self._responses())
        assert set(result.to_dict()["categoryScores"]["Teaching"]) == {"score", "percentage"}

    def test_empty(self):
        result = score_interest([])
        assert result.percentage == 0.0
        assert result.category_scores == {}


class TestLearningStyle:
    """Answer frequencies."""

    def test_dominant_style(self):
        result = score_learning_style([
            make_response("Input Style", "Visual"),
            make_response("Environment", "Auditory"),
            make_response("Retention", "Visual"),
        ])
        assert result.dominant_style == "Visual"
        assert result.percentage == 100.0
        assert result.overall_score == 3
        visual = result.category_scores["Visual"]
        assert visual.count == 2
        assert visual.percentage == pytest.approx(200 / 3)
        assert result.to_dict()["dominantStyle"] == "Visual"

    def test_tie_keeps_first_seen(self):
        result = score_learning_style([
            make_response("Input Style", "Hands-on"),
            make_response("Environment", "Reading"),
        ])
        assert result.dominant_style == "Hands-on"

    def test_empty(self):
        result = score_learning_style([])
        assert result.dominant_style is None
        assert result.percentage == 0.0
        assert "dominantStyle" not in result.to_dict()


class TestGeneric:
    """Fallback for unknown types."""

    def test_three_of_five(self):
        responses = [make_response("Any", "x"), make_response("Any", "y")]
        result = score_generic(responses, assessment_type="MYSTERY")
        assert result.overall_score == 6
        assert result.percentage == pytest.approx(60.0)
        assert result.assessment_type == "MYSTERY"

    def test_empty(self):
        assert score_generic([]).percentage == 0.0


class TestCategoryScore:
    """Wire serialisation."""

    def test_none_fields_omitted(self):
        cs = CategoryScore(score=3.0, percentage=60.0, answers=["Neutral"])
        assert cs.to_dict() == {"score": 3.0, "percentage": 60.0}


class TestScoringRegistry:
    """Dispatch by assessment type."""

    registry = ScoringRegistry()

    @pytest.mark.parametrize("assessment_type", list(AssessmentType))
    def test_supports_every_builtin_type(self, assessment_type):
        assert self.registry.supports(assessment_type)
        assert self.registry.supports(assessment_type.value.lower())

    def test_dispatch_by_name(self, aptitude_responses):
        result = self.registry.score("aptitude", aptitude_responses)
        assert result.assessment_type == "APTITUDE"
        assert result.percentage == pytest.approx(70.0)

    def test_unknown_type_uses_generic(self, aptitude_responses):
        assert not self.registry.supports("MYSTERY")
        result = self.registry.score("MYSTERY", aptitude_responses)
        assert result.assessment_type == "MYSTERY"
        assert result.overall_score == 6
        assert result.percentage == pytest.approx(60.0)

    @pytest.mark.parametrize("assessment_type", list(AssessmentType))
    def test_empty_responses_never_raise(self, assessment_type):
        result = self.registry.score(assessment_type, [])
        assert result.percentage == 0.0

    def test_injected_lexicon(self):
        registry = ScoringRegistry(lexicon={"Yes": 5})
        result = registry.score(AssessmentType.APTITUDE, [make_response("Spatial", "Yes")])
        assert result.percentage == pytest.approx(100.0)

    def test_injected_algorithms(self, aptitude_responses):
        registry = ScoringRegistry(algorithms={"APTITUDE": score_generic})
        result = registry.score(AssessmentType.APTITUDE, aptitude_responses)
        assert result.overall_score == 6
        assert not registry.supports(AssessmentType.SKILL)
