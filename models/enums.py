"""
Enumerations and constants for the Readiness Assessment.

This module defines all the fixed values used by the deterministic scoring
model and the linear step sequence: category prefixes, weights, thresholds,
and the per-section question catalogs.
"""

from enum import Enum
from typing import Dict, List


class Recommendation(str, Enum):
    """
    Recommendation tier derived from the overall score.

    Mapping (deterministic):
    - overall >= 75: strong_fit
    - 50 <= overall < 75: moderate_fit
    - overall < 50: weak_fit
    """
    STRONG_FIT = "strong_fit"
    MODERATE_FIT = "moderate_fit"
    WEAK_FIT = "weak_fit"


class Step(str, Enum):
    """Steps of the assessment flow, in order."""
    HERO = "hero"
    INTRODUCTION = "introduction"
    PSYCHOMETRIC = "psychometric"
    TECHNICAL = "technical"
    WISCAR = "wiscar"
    CAREER = "career"
    RESULTS = "results"


# Ordered step sequence; the last entry is the terminal (results) step
STEPS: List[Step] = list(Step)
TOTAL_STEPS: int = len(STEPS)

# Primary categories (each weighted 30% in the overall score)
PSYCHOMETRIC_PREFIX = "psychometric_"
TECHNICAL_PREFIX = "technical_"

# WISCAR dimensions, keyed by the field name used in DimensionScores
DIMENSION_PREFIXES: Dict[str, str] = {
    "will": "wiscar_will_",
    "interest": "wiscar_interest_",
    "skill": "wiscar_skill_",
    "cognitive": "wiscar_cognitive_",
    "ability": "wiscar_ability_",
    "real_world": "wiscar_realWorld_",
}

DIMENSION_LABELS: Dict[str, str] = {
    "will": "Will (Persistence)",
    "interest": "Interest (Curiosity)",
    "skill": "Skill (Current Abilities)",
    "cognitive": "Cognitive (Mental Capacity)",
    "ability": "Ability (Learning Capacity)",
    "real_world": "Real-World Fit",
}

# Overall score weights (total = 1.0)
OVERALL_WEIGHTS = {
    "psychometric": 0.3,
    "technical": 0.3,
    "dimensions": 0.4,
}

# Likert 1-5 mean is rescaled to 0-100
SCORE_SCALE_FACTOR = 20
MAX_CATEGORY_SCORE = 100.0

# Recommendation thresholds (inclusive lower bounds, checked in order)
RECOMMENDATION_THRESHOLDS = [
    (75.0, Recommendation.STRONG_FIT),
    (50.0, Recommendation.MODERATE_FIT),
]

# Question IDs per question-bearing step (static catalog consumed by the gating rule)
PSYCHOMETRIC_QUESTIONS: List[str] = (
    [f"psychometric_interest_{i}" for i in range(1, 5)]
    + [f"psychometric_personality_{i}" for i in range(1, 6)]
    + [f"psychometric_motivation_{i}" for i in range(1, 5)]
    + [f"psychometric_cognitive_{i}" for i in range(1, 4)]
)
TECHNICAL_QUESTIONS: List[str] = (
    [f"technical_aptitude_{i}" for i in range(1, 4)]
    + [f"technical_prereq_{i}" for i in range(1, 4)]
    + [f"technical_domain_{i}" for i in range(1, 5)]
)
WISCAR_QUESTIONS: List[str] = [
    f"{prefix}{i}"
    for prefix in DIMENSION_PREFIXES.values()
    for i in range(1, 5)
]

SECTION_QUESTIONS: Dict[Step, List[str]] = {
    Step.PSYCHOMETRIC: PSYCHOMETRIC_QUESTIONS,
    Step.TECHNICAL: TECHNICAL_QUESTIONS,
    Step.WISCAR: WISCAR_QUESTIONS,
}

# Headline and next steps shown for each tier on the results page
RECOMMENDATION_TEXT = {
    Recommendation.STRONG_FIT: {
        "title": "Yes, You Should Learn Digital Forensics!",
        "description": (
            "Your results show strong alignment with the analytical thinking, "
            "technical aptitude and motivation the field asks for."
        ),
        "next_steps": [
            "Begin with foundational courses in digital forensics and cybersecurity",
            "Learn forensic tools like Autopsy, FTK, or Wireshark through hands-on labs",
            "Practice with Capture The Flag (CTF) competitions and TryHackMe scenarios",
            "Consider pursuing certifications like CompTIA Security+ or GCFA",
        ],
    },
    Recommendation.MODERATE_FIT: {
        "title": "Maybe - Consider Exploring Further",
        "description": (
            "Your results show potential, but some areas may need development. "
            "An introductory course can confirm your interest."
        ),
        "next_steps": [
            "Take an introductory digital forensics course to gauge your interest",
            "Shadow a digital forensics professional for a day",
            "Strengthen your technical foundation with OS and networking courses",
            "Try basic forensic challenges on platforms like CyberDefenders",
        ],
    },
    Recommendation.WEAK_FIT: {
        "title": "Consider Alternative Paths",
        "description": (
            "Digital forensics may not be the best fit at this time. Related "
            "fields in cybersecurity might align better with your strengths."
        ),
        "next_steps": [
            "Consider cybersecurity analysis or network security roles",
            "Explore data analysis or business intelligence careers",
            "Look into IT audit or compliance roles",
            "Consider risk management or security policy development",
        ],
    },
}
