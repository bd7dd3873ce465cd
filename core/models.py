"""
Domain models shared by the agent client, the controller and the web API.

JobAnalysis and its nested models double as the structured-output schema
sent to the LLM, so they forbid extra keys and declare every field.
"""
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


class TrackingStatus(str, Enum):
    """Pipeline stage a user assigns to a job they are pursuing."""
    SCOUTED = "Scouted"  # never assigned by any operation
    INTERESTED = "Interested"
    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    REJECTED = "Rejected"


ASSIGNABLE_STATUSES = (
    TrackingStatus.INTERESTED,
    TrackingStatus.APPLIED,
    TrackingStatus.INTERVIEWING,
    TrackingStatus.REJECTED,
)


class Skill(BaseModel):
    name: str
    level: SkillLevel = SkillLevel.INTERMEDIATE


class UserProfile(BaseModel):
    """The job seeker's profile. Skills keep insertion order."""
    name: str = ""
    title: str = ""
    skills: List[Skill] = Field(default_factory=list)
    experience: str = ""

    def add_skill(self, name: str, level: SkillLevel = SkillLevel.INTERMEDIATE) -> Optional[Skill]:
        """Append a skill. Blank names are ignored and return None."""
        name = (name or "").strip()
        if not name:
            return None
        skill = Skill(name=name, level=level)
        self.skills.append(skill)
        return skill

    def remove_skill(self, name: str) -> int:
        """Remove every skill with this name. Returns how many were removed."""
        before = len(self.skills)
        self.skills = [s for s in self.skills if s.name != name]
        return before - len(self.skills)

    @property
    def skill_names(self) -> List[str]:
        return [s.name for s in self.skills]

    def is_ready_for_search(self) -> bool:
        return bool(self.title.strip()) and len(self.skills) > 0


class JobListing(BaseModel):
    """A discovered lead, or a tracked snapshot when tracking_status is set."""
    id: str
    title: str
    company: str
    location: str
    snippet: str = ""
    url: str = ""
    match_score: Optional[float] = None
    tracking_status: Optional[TrackingStatus] = None


# ============================================================================
# JOB ANALYSIS
# ============================================================================

class CompanyCulture(BaseModel):
    model_config = ConfigDict(extra='forbid')

    values: List[str] = Field(description="Three core company values")
    recent_news: str = Field(description="A recent news item about the company")
    pros: List[str] = Field(description="Two reasons to join")
    cons: List[str] = Field(description="Two reasons for caution")


class SalaryInsights(BaseModel):
    model_config = ConfigDict(extra='forbid')

    low: float = Field(description="Low end of annual salary for this role and location")
    high: float = Field(description="High end of annual salary for this role and location")
    average: float = Field(description="Average annual salary for this role and location")
    currency: str = Field(description="ISO currency code, e.g. USD")
    context: str = Field(description="Where the figures come from and what they cover")


class MarketResearch(BaseModel):
    model_config = ConfigDict(extra='forbid')

    industry_trends: List[str] = Field(description="Three industry trends")
    competitors: List[str] = Field(description="Three main competitors")
    salary_insights: SalaryInsights
    growth_outlook: str = Field(description="Growth outlook for the role and company")
    stability_rating: Literal["High", "Medium", "Low"] = Field(
        description="Company stability based on recent news"
    )


class InterviewQuestion(BaseModel):
    model_config = ConfigDict(extra='forbid')

    question: str
    suggested_answer: str


class JobAnalysis(BaseModel):
    """Deep analysis of one job against the user's profile."""
    model_config = ConfigDict(extra='forbid', allow_inf_nan=False)

    match_score: float = Field(description="Match score from 0 to 100")
    matching_skills: List[str] = Field(description="Profile skills the job asks for")
    missing_skills: List[str] = Field(description="Skills the job asks for that the profile lacks")
    resume_tips: List[str] = Field(description="Resume bullet points tailored to this job")
    cover_letter: str = Field(description="Professional cover letter draft")
    company_culture: CompanyCulture
    market_research: MarketResearch
    interview_questions: List[InterviewQuestion] = Field(
        description="Likely interview questions with suggested answers"
    )
    strategic_advice: str
    decision_summary: str = Field(
        description="Two-sentence evaluation of whether this is a strong career move"
    )


# ============================================================================
# CHAT & FILTERS
# ============================================================================

class ChatRole(str, Enum):
    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    role: ChatRole
    text: str


class FilterCriteria(BaseModel):
    """Client-side filter over discovered leads. Defaults pass every job."""
    query: str = ""
    min_score: float = Field(default=0, ge=0, le=100)
    location: str = ""
