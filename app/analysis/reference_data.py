from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

GENERAL_INDUSTRY = "general"

_INDUSTRY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technology": (
        "software development",
        "web development",
        "backend",
        "frontend",
        "full stack",
        "agile",
        "scrum",
        "kanban",
        "CI/CD",
        "cloud computing",
        "AWS",
        "Azure",
        "GCP",
        "Docker",
        "Kubernetes",
        "microservices",
        "API development",
        "REST",
        "GraphQL",
        "database design",
        "SQL",
        "Postgres",
        "MySQL",
        "NoSQL",
        "MongoDB",
        "version control",
        "Git",
        "testing",
        "unit testing",
        "integration testing",
        "debugging",
        "performance optimization",
        "scalability",
        "security",
        "devops",
        "infrastructure as code",
        "monitoring",
        "machine learning",
        "Python",
        "JavaScript",
        "TypeScript",
        "React",
        "problem-solving",
        "collaboration",
        "code review",
        "technical documentation",
    ),
    "marketing": (
        "digital marketing",
        "SEO",
        "SEM",
        "content marketing",
        "social media",
        "Google Analytics",
        "email campaigns",
        "A/B testing",
        "conversion optimization",
        "marketing automation",
        "CRM",
        "brand management",
        "market research",
        "campaign management",
        "ROI analysis",
        "stakeholder management",
        "content strategy",
        "growth marketing",
        "paid media",
    ),
    "finance": (
        "financial analysis",
        "budgeting",
        "forecasting",
        "risk management",
        "compliance",
        "financial modeling",
        "Excel",
        "QuickBooks",
        "SAP",
        "auditing",
        "tax preparation",
        "accounts payable",
        "accounts receivable",
        "financial reporting",
        "GAAP",
        "regulatory compliance",
        "data analysis",
        "valuation",
    ),
    "healthcare": (
        "patient care",
        "medical records",
        "HIPAA compliance",
        "EMR/EHR",
        "clinical procedures",
        "diagnosis",
        "treatment planning",
        "patient education",
        "medical terminology",
        "healthcare regulations",
        "quality assurance",
        "interdisciplinary collaboration",
        "telemedicine",
        "patient safety",
    ),
    "education": (
        "curriculum development",
        "lesson planning",
        "classroom management",
        "student assessment",
        "educational technology",
        "differentiated instruction",
        "parent communication",
        "learning management systems",
        "student engagement",
        "educational standards",
        "instructional design",
        "assessment design",
    ),
    GENERAL_INDUSTRY: (
        "leadership",
        "team management",
        "project management",
        "communication",
        "problem-solving",
        "critical thinking",
        "time management",
        "adaptability",
        "collaboration",
        "strategic planning",
        "data analysis",
        "process improvement",
        "stakeholder management",
        "budget management",
        "presentation skills",
    ),
}

_ACTION_VERBS: tuple[str, ...] = (
    "achieved",
    "improved",
    "developed",
    "implemented",
    "led",
    "managed",
    "created",
    "designed",
    "optimized",
    "increased",
    "reduced",
    "streamlined",
    "coordinated",
    "executed",
    "delivered",
    "launched",
    "established",
    "transformed",
    "analyzed",
    "resolved",
    "spearheaded",
    "orchestrated",
    "mentored",
    "automated",
)

ATS_OPTIMIZATION_TIPS: tuple[str, ...] = (
    "Use standard section headings (Experience, Education, Skills)",
    "Include relevant keywords from the job description",
    "Use a simple, clean format without complex tables or graphics",
    "List skills in a dedicated Skills section",
    "Include measurable achievements with numbers and percentages",
    "Use industry-standard job titles",
    "Spell out acronyms on first use",
    "Save as .docx or .pdf format",
    "Use standard fonts (Arial, Calibri, Times New Roman)",
    "Avoid headers and footers for important information",
)


@dataclass(frozen=True)
class ReferenceData:
    """Keyword and action-verb tables the analyzer matches against.

    Tables are copied into read-only containers on construction, so a single
    instance can be shared by every analysis running in the process.
    """

    industry_keywords: Mapping[str, tuple[str, ...]]
    action_verbs: tuple[str, ...]

    def __post_init__(self) -> None:
        if GENERAL_INDUSTRY not in self.industry_keywords:
            raise ValueError(f"Reference keywords must include a '{GENERAL_INDUSTRY}' entry.")
        frozen = {str(tag): tuple(items) for tag, items in self.industry_keywords.items()}
        object.__setattr__(self, "industry_keywords", MappingProxyType(frozen))
        object.__setattr__(self, "action_verbs", tuple(self.action_verbs))

    @classmethod
    def build(
        cls,
        industry_keywords: Mapping[str, Iterable[str]],
        action_verbs: Iterable[str],
    ) -> "ReferenceData":
        """Build tables from loose input, dropping blank entries."""
        return cls(
            industry_keywords={
                str(tag): tuple(str(item) for item in items if str(item).strip())
                for tag, items in industry_keywords.items()
            },
            action_verbs=tuple(str(verb) for verb in action_verbs if str(verb).strip()),
        )

    @property
    def industries(self) -> tuple[str, ...]:
        return tuple(self.industry_keywords.keys())

    def keywords_for(self, industry: str | None) -> tuple[str, ...]:
        """Keywords of one industry tag (exact match), or the general list for unknown tags."""
        if industry is not None and industry in self.industry_keywords:
            return self.industry_keywords[industry]
        return self.industry_keywords[GENERAL_INDUSTRY]

    @property
    def general_keywords(self) -> tuple[str, ...]:
        return self.industry_keywords[GENERAL_INDUSTRY]


DEFAULT_REFERENCE = ReferenceData.build(_INDUSTRY_KEYWORDS, _ACTION_VERBS)
