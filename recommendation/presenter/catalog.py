"""
Presentation catalog

Static lookups the results page shows next to a recommendation.
Keys of COLLEGE_TOP_MAJORS are lowercase; lookups trim and lowercase the name.
"""

from typing import Dict, List, Optional

from ..logic.contracts import CollegeStats


PERSONALITY_TYPES: List[str] = [
    "INTJ", "INTP", "ENTJ", "ENTP",
    "INFJ", "INFP", "ENFJ", "ENFP",
    "ISTJ", "ISFJ", "ESTJ", "ESFJ",
    "ISTP", "ISFP", "ESTP", "ESFP",
]

DEFAULT_TOP_MAJORS: List[str] = ["Data Science", "Communications", "Experience Design"]

_BUSINESS = ["Accountancy", "Finance", "Information Systems", "Management", "Supply Chain"]
_FINE_ARTS = ["Art", "Design", "Dance", "Music", "Communications"]
_HUMANITIES = ["English", "Philosophy", "Languages", "Comparative Arts & Letters"]
_LIFE_SCIENCES = ["Biology", "Nutrition", "Public Health", "Neuroscience", "Plant & Wildlife Sciences"]
_NURSING = ["Nursing (BS)", "Nursing (MS)", "Nurse Practitioner Programs"]
_PHYSICAL_SCIENCES = ["Chemistry", "Physics", "Mathematics", "Computer Science", "Applied Statistics"]
_SOCIAL_SCIENCES = ["Sociology", "Psychology", "Family Studies", "Economics", "Anthropology"]
_INTERNATIONAL = ["International Relations", "Area Studies", "Language & Cultural Studies"]
_LAW = ["Juris Doctor (JD)", "Business Law", "International Law"]
_EDUCATION = ["Elementary Education", "Special Education", "Early Childhood Education"]
_RELIGIOUS_EDUCATION = ["Ancient Scripture", "Church History", "World Religions"]
_UNDERGRADUATE_EDUCATION = ["General Education", "Interdisciplinary Studies", "Teacher Preparation"]
_ENGINEERING = ["Mechanical Engineering", "Electrical Engineering", "Computer Engineering", "Civil Engineering"]
_UNIVERSITY_WIDE = ["General Education", "Campus-wide Programs", "Leadership Development"]

COLLEGE_TOP_MAJORS: Dict[str, List[str]] = {
    "marriott school of business": _BUSINESS,
    "business": _BUSINESS,
    "college of fine arts and communications": _FINE_ARTS,
    "fine arts and communications": _FINE_ARTS,
    "fine arts": _FINE_ARTS,
    "college of humanities": _HUMANITIES,
    "humanities": _HUMANITIES,
    "college of life sciences": _LIFE_SCIENCES,
    "life sciences": _LIFE_SCIENCES,
    "college of nursing": _NURSING,
    "nursing": _NURSING,
    "college of physical and mathematical sciences": _PHYSICAL_SCIENCES,
    "college of computational, mathematical & physical sciences": _PHYSICAL_SCIENCES,
    "college of computational, mathematical and physical sciences": _PHYSICAL_SCIENCES,
    "computational, mathematical and physical sciences": _PHYSICAL_SCIENCES,
    "college of family, home, and social sciences": _SOCIAL_SCIENCES,
    "college of family, home & social sciences": _SOCIAL_SCIENCES,
    "family, home & social sciences": _SOCIAL_SCIENCES,
    "family, home, and social sciences": _SOCIAL_SCIENCES,
    "david m. kennedy center for international studies": _INTERNATIONAL,
    "kennedy center for international studies": _INTERNATIONAL,
    "international studies": _INTERNATIONAL,
    "j. reuben clark law school": _LAW,
    "law school": _LAW,
    "law": _LAW,
    "david o. mckay school of education": _EDUCATION,
    "school of education": _EDUCATION,
    "education": _EDUCATION,
    "college of religious education": _RELIGIOUS_EDUCATION,
    "religious education": _RELIGIOUS_EDUCATION,
    "college of undergraduate education": _UNDERGRADUATE_EDUCATION,
    "undergraduate education": _UNDERGRADUATE_EDUCATION,
    "continuing education": ["Evening Classes", "Independent Study", "Professional Certificates"],
    "ira a. fulton college of engineering": _ENGINEERING,
    "engineering": _ENGINEERING,
    "brigham young university": _UNIVERSITY_WIDE,
    "byu": _UNIVERSITY_WIDE,
    "other": ["Interdisciplinary Studies", "Entrepreneurship", "Data Analytics"],
}


def top_majors(college: Optional[str]) -> List[str]:
    """Top majors for a college, or DEFAULT_TOP_MAJORS when unknown."""
    if not college:
        return list(DEFAULT_TOP_MAJORS)
    normalized = college.strip().lower()
    return list(COLLEGE_TOP_MAJORS.get(normalized, DEFAULT_TOP_MAJORS))


def most_popular_colleges(colleges: List[CollegeStats]) -> List[str]:
    """Names of the colleges with the most answers (ties all count)."""
    if not colleges:
        return []
    max_responses = max(c.total_responses for c in colleges)
    if max_responses <= 0:
        return []
    return [c.college for c in colleges if c.total_responses == max_responses]
