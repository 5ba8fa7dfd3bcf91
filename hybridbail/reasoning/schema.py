from __future__ import annotations
from typing import Dict, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, computed_field

from hybridbail.utils.config import settings
from .classifier import Category, classify

BlockKind = Literal["paragraph", "bullet"]
Recommendation = Literal["GRANT", "DENY", "HUMAN_INTERVENTION_REQUIRED"]


class Run(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    emphasized: bool = False


class Block(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    text: str
    runs: Tuple[Run, ...] = ()

    @property
    def plain_text(self) -> str:
        return "".join(r.text for r in self.runs)


class SectionCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: Optional[int] = None
    raw_heading: str = ""
    body_text: str = ""


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    ordinal: int
    number: Optional[int] = None
    raw_heading: str = ""
    body_text: str = ""
    blocks: Tuple[Block, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def category(self) -> Category:
        return classify(self.raw_heading)

    @property
    def title(self) -> str:
        """Heading as displayed: trailing colon dropped."""
        return self.raw_heading.strip().rstrip(":").strip()


class ParsedNarrative(BaseModel):
    model_config = ConfigDict(frozen=True)

    sections: Tuple[Section, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.sections


# ---------- caller-supplied report data ----------
class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class LegalProvisions(_Record):
    provisions: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)  # statute -> sections
    all_sections: Tuple[str, ...] = ()
    primary_statute: str = ""
    offense_nature: str = ""

    @property
    def ipc_sections(self) -> Tuple[str, ...]:
        return self.provisions.get("IPC", ())


class HealthStatus(_Record):
    has_health_issues: bool = False
    medical_bail_eligible: bool = False
    conditions: Tuple[str, ...] = ()


class CriminalHistory(_Record):
    category: str = ""
    previous_cases: Optional[int] = None
    repeat_offender: bool = False
    first_time_accused: bool = False


class FamilyCircumstances(_Record):
    has_dependents: bool = False
    sole_breadwinner: bool = False
    pregnant: bool = False
    elderly_parents: bool = False
    minor_children: bool = False


class AccusedProfile(_Record):
    age: Optional[int] = None
    age_group: str = ""
    gender: str = ""
    custody_duration: Optional[str] = None
    custody_days: Optional[int] = None
    health_status: HealthStatus = Field(default_factory=HealthStatus)
    criminal_history: CriminalHistory = Field(default_factory=CriminalHistory)
    socioeconomic_status: str = ""
    region: Optional[str] = None
    employment_status: Optional[str] = None
    family_circumstances: FamilyCircumstances = Field(default_factory=FamilyCircumstances)


class PrecedentCase(_Record):
    case_title: Optional[str] = None
    decision: Optional[str] = None
    similarity_score: Optional[float] = None


class AnalysisResult(BaseModel):
    """
    Subset of the analysis service payload needed to frame a report.
    Unknown keys are ignored; the nested records are optional.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    case_id: str
    filename: str = ""
    category: str = ""
    recommendation: Recommendation = "HUMAN_INTERVENTION_REQUIRED"
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    legal_provisions: Optional[LegalProvisions] = None
    accused_profile: Optional[AccusedProfile] = None
    similar_precedents: Tuple[PrecedentCase, ...] = ()
    detailed_reasoning: str = ""
    precedent_summary: str = ""
    timestamp: str = ""


class ReportFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = "Bail Analysis Report"
    product_name: str = Field(default_factory=lambda: settings.app_name)
    reasoning_heading: str = "Detailed Legal Analysis & Reasoning"
    intro: str = (
        "The following is a comprehensive legal analysis based on the bail application, "
        "applicable legal provisions, and the system's algorithmic assessment of relevant factors."
    )
    disclaimer: str = (
        "This analysis is generated by an AI system and is intended for informational purposes only. "
        "It should not be considered as legal advice."
    )
    footer: str = "AI-Powered Bail Decision Support System"
    empty_message: str = "No detailed reasoning is available for this case."
