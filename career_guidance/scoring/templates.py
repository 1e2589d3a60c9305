"""Built-in assessment templates.

Static catalog of the six assessment families. Questions are instantiated
from a template when a user starts an assessment and are immutable from then
on, so later template edits never change how an existing submission scores.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple, Union
from uuid import uuid4

from career_guidance.models.assessment import Question
from career_guidance.models.enums import AssessmentType
from career_guidance.scoring.lexicon import (
    AGREEMENT_SCALE,
    IMPORTANCE_SCALE,
    PROFICIENCY_SCALE,
)

_AGREEMENT: Tuple[str, ...] = tuple(AGREEMENT_SCALE)
_PROFICIENCY: Tuple[str, ...] = tuple(PROFICIENCY_SCALE)
_IMPORTANCE: Tuple[str, ...] = tuple(IMPORTANCE_SCALE)


@dataclass(frozen=True)
class TemplateQuestion:
    text: str
    options: Tuple[str, ...]
    category: str
    weight: float = 1.0


@dataclass(frozen=True)
class AssessmentTemplate:
    type: AssessmentType
    title: str
    description: str
    time_limit: int  # minutes
    questions: Tuple[TemplateQuestion, ...]

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "timeLimit": self.time_limit,
            "questionCount": len(self.questions),
        }


_APTITUDE = AssessmentTemplate(
    type=AssessmentType.APTITUDE,
    title="Career Aptitude Assessment",
    description="Discover your natural abilities and suitable career paths",
    time_limit=20,
    questions=(
        TemplateQuestion("I excel at solving complex mathematical problems and working with numbers", _AGREEMENT, "Logical-Mathematical"),
        TemplateQuestion("I prefer working with my hands and building physical things", _AGREEMENT, "Kinesthetic"),
        TemplateQuestion("I enjoy reading, writing, and expressing complex ideas through words", _AGREEMENT, "Linguistic"),
        TemplateQuestion("I like analyzing data, finding patterns, and drawing conclusions", _AGREEMENT, "Analytical"),
        TemplateQuestion("I enjoy helping others and working collaboratively in teams", _AGREEMENT, "Interpersonal"),
        TemplateQuestion("I prefer working independently and setting my own pace", _AGREEMENT, "Intrapersonal"),
        TemplateQuestion("I enjoy creating art, music, or other creative works", _AGREEMENT, "Creative"),
        TemplateQuestion("I like understanding how things work and conducting experiments", _AGREEMENT, "Scientific"),
        TemplateQuestion("I enjoy organizing events, leading groups, and taking charge", _AGREEMENT, "Leadership"),
        TemplateQuestion("I prefer detailed, systematic work over open-ended creative tasks", _AGREEMENT, "Systematic"),
        TemplateQuestion("I can easily visualize objects in 3D and understand spatial relationships", _AGREEMENT, "Spatial"),
        TemplateQuestion("I have a good sense of rhythm and can easily learn musical patterns", _AGREEMENT, "Musical"),
    ),
)

_INTEREST = AssessmentTemplate(
    type=AssessmentType.INTEREST,
    title="Career Interest Inventory",
    description="Identify your interests and matching career fields",
    time_limit=15,
    questions=(
        TemplateQuestion(
            "Which activity interests you most?",
            ("Conducting scientific research", "Teaching and mentoring others", "Creating artistic works",
             "Managing business operations", "Helping people solve problems"),
            "Primary Interest", 1.2,
        ),
        TemplateQuestion(
            "In your free time, you prefer to:",
            ("Read about new technologies", "Volunteer for social causes", "Write or create content",
             "Plan and organize events", "Exercise or play sports"),
            "Leisure Preference",
        ),
        TemplateQuestion(
            "Which subject did you enjoy most in school?",
            ("Mathematics and Science", "Literature and History", "Art and Music",
             "Business Studies", "Physical Education"),
            "Academic Interest",
        ),
        TemplateQuestion(
            "Your ideal work environment would be:",
            ("Laboratory or research facility", "School or community center", "Studio or creative space",
             "Corporate office", "Outdoor or varied locations"),
            "Work Environment",
        ),
        TemplateQuestion(
            "Which career field excites you most?",
            ("Technology and Innovation", "Education and Social Work", "Arts and Entertainment",
             "Business and Finance", "Healthcare and Medicine"),
            "Career Field", 1.2,
        ),
        TemplateQuestion(
            "When working on projects, you prefer:",
            ("Researching and analyzing data", "Collaborating with diverse teams", "Designing and creating",
             "Planning and executing strategies", "Providing direct service to others"),
            "Work Style",
        ),
        TemplateQuestion(
            "What motivates you most in work?",
            ("Discovering new knowledge", "Making a positive impact on society", "Expressing creativity",
             "Achieving financial success", "Helping individuals directly"),
            "Motivation", 1.1,
        ),
        TemplateQuestion(
            "Which type of problem-solving appeals to you?",
            ("Technical and logical problems", "Social and interpersonal issues", "Creative and design challenges",
             "Strategic and business problems", "Health and wellness concerns"),
            "Problem Solving",
        ),
    ),
)

_PERSONALITY = AssessmentTemplate(
    type=AssessmentType.PERSONALITY,
    title="Personality Type Assessment",
    description="Understand your personality traits and work style preferences",
    time_limit=18,
    questions=(
        TemplateQuestion(
            "In social situations, I usually:",
            ("Take charge and lead conversations", "Listen more than I speak", "Adapt to the group's energy",
             "Prefer one-on-one interactions", "Feel energized by large groups"),
            "Social Style",
        ),
        TemplateQuestion(
            "When making decisions, I rely more on:",
            ("Logic and objective facts", "Intuition and gut feelings", "Past experiences and patterns",
             "Others' opinions and consensus", "Detailed analysis and research"),
            "Decision Making", 1.1,
        ),
        TemplateQuestion(
            "I work best when:",
            ("I have a detailed plan and structure", "I can be flexible and spontaneous",
             "I have clear deadlines and goals", "I can work at my own pace", "I have variety in my tasks"),
            "Work Style",
        ),
        TemplateQuestion(
            "Under pressure, I tend to:",
            ("Stay calm and focused", "Seek help from others", "Take breaks to recharge",
             "Push through with determination", "Break tasks into smaller steps"),
            "Stress Response",
        ),
        TemplateQuestion(
            "I am most motivated by:",
            ("Achievement and recognition", "Learning and personal growth", "Helping others succeed",
             "Creative expression", "Financial rewards"),
            "Motivation", 1.1,
        ),
        TemplateQuestion(
            "When learning new things, I prefer to:",
            ("Read and study independently", "Discuss with others", "Learn by doing hands-on",
             "Watch demonstrations", "Take structured courses"),
            "Learning Style",
        ),
        TemplateQuestion(
            "In team projects, I naturally:",
            ("Take the leadership role", "Support and encourage others", "Focus on creative ideas",
             "Handle detailed planning", "Ensure quality and accuracy"),
            "Team Role",
        ),
        TemplateQuestion(
            "I prefer work that is:",
            ("Predictable and routine", "Varied and changing", "Challenging and complex",
             "Collaborative and social", "Independent and autonomous"),
            "Work Preference",
        ),
    ),
)

_SKILL = AssessmentTemplate(
    type=AssessmentType.SKILL,
    title="Skills Assessment",
    description="Evaluate your current skills and identify areas for development",
    time_limit=25,
    questions=(
        TemplateQuestion("Rate your proficiency in written communication:", _PROFICIENCY, "Communication"),
        TemplateQuestion("Rate your proficiency in public speaking and presentations:", _PROFICIENCY, "Communication"),
        TemplateQuestion("Rate your proficiency in data analysis and interpretation:", _PROFICIENCY, "Analytical"),
        TemplateQuestion("Rate your proficiency in project management:", _PROFICIENCY, "Management"),
        TemplateQuestion("Rate your proficiency in computer programming:", _PROFICIENCY, "Technical"),
        TemplateQuestion("Rate your proficiency in creative design (visual/graphic):", _PROFICIENCY, "Creative"),
        TemplateQuestion("Rate your proficiency in financial analysis and budgeting:", _PROFICIENCY, "Financial"),
        TemplateQuestion("Rate your proficiency in research and information gathering:", _PROFICIENCY, "Research"),
        TemplateQuestion("Rate your proficiency in team leadership:", _PROFICIENCY, "Leadership"),
        TemplateQuestion("Rate your proficiency in problem-solving and critical thinking:", _PROFICIENCY, "Analytical"),
    ),
)

_CAREER_VALUES = AssessmentTemplate(
    type=AssessmentType.CAREER_VALUES,
    title="Career Values Assessment",
    description="Identify what matters most to you in your career",
    time_limit=12,
    questions=(
        TemplateQuestion("How important is work-life balance to you?", _IMPORTANCE, "Lifestyle"),
        TemplateQuestion("How important is high salary and financial rewards?", _IMPORTANCE, "Financial"),
        TemplateQuestion("How important is job security and stability?", _IMPORTANCE, "Security"),
        TemplateQuestion("How important is making a positive impact on society?", _IMPORTANCE, "Purpose"),
        TemplateQuestion("How important is creative expression in your work?", _IMPORTANCE, "Creativity"),
        TemplateQuestion("How important is career advancement and growth opportunities?", _IMPORTANCE, "Growth"),
    ),
)

_LEARNING_STYLE = AssessmentTemplate(
    type=AssessmentType.LEARNING_STYLE,
    title="Learning Style Assessment",
    description="Discover how you learn best and optimize your study approach",
    time_limit=10,
    questions=(
        TemplateQuestion(
            "I learn best when information is presented:",
            ("Visually with charts and diagrams", "Through listening and discussion",
             "Through hands-on practice", "Through reading and writing"),
            "Input Style",
        ),
        TemplateQuestion(
            "When studying, I prefer to:",
            ("Work alone in quiet spaces", "Study with others in groups",
             "Move around while learning", "Have background music or noise"),
            "Environment",
        ),
        TemplateQuestion(
            "I remember information better when I:",
            ("See it written or drawn", "Hear it explained", "Practice it myself", "Discuss it with others"),
            "Retention",
        ),
        TemplateQuestion(
            "When learning new skills, I prefer to:",
            ("Follow step-by-step instructions", "Learn through trial and error",
             "Watch someone demonstrate first", "Jump in and figure it out"),
            "Approach",
        ),
    ),
)

ASSESSMENT_TEMPLATES: Mapping[AssessmentType, AssessmentTemplate] = MappingProxyType({
    t.type: t
    for t in (_APTITUDE, _INTEREST, _PERSONALITY, _SKILL, _CAREER_VALUES, _LEARNING_STYLE)
})


def get_template(assessment_type: Union[AssessmentType, str]) -> AssessmentTemplate:
    """Look up a template by type; raises ValueError for unknown types."""
    try:
        return ASSESSMENT_TEMPLATES[AssessmentType(assessment_type)]
    except ValueError:
        raise ValueError(f"Invalid assessment type: {assessment_type}") from None


def build_questions(assessment_type: Union[AssessmentType, str]) -> List[Question]:
    """Instantiate the template's questions with fresh ids and 1-based order."""
    template = get_template(assessment_type)
    return [
        Question(
            id=str(uuid4()),
            text=q.text,
            options=q.options,
            category=q.category,
            weight=q.weight,
            order=index,
        )
        for index, q in enumerate(template.questions, start=1)
    ]


def available_assessments(
    completed_types: Iterable[Union[AssessmentType, str]] = (),
) -> List[dict]:
    """List every template with an ``isCompleted`` flag for the given user."""
    done = {AssessmentType(t) for t in completed_types}
    return [
        {**template.to_dict(), "isCompleted": template.type in done}
        for template in ASSESSMENT_TEMPLATES.values()
    ]
