"""Data records passed between the engine components."""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field, asdict


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Recommendation:
    """Purchasing guidance for a domain."""
    priority: str  # 'high' | 'medium' | 'low'
    message: str
    action: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class DomainQuote:
    """Raw answer from a domain availability backend."""
    available: bool
    price: Optional[float] = None
    currency: Optional[str] = None


@dataclass
class DomainCheck:
    """Availability of one fully-qualified domain."""
    domain: str
    available: bool
    api_source: str
    price: Optional[float] = None
    currency: Optional[str] = None
    confidence: Optional[str] = None
    note: Optional[str] = None
    cached: bool = False

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'domain': self.domain,
            'available': self.available,
            'api_source': self.api_source,
            'cached': self.cached
        }
        for key in ('price', 'currency', 'confidence', 'note'):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


@dataclass
class DomainAvailabilityResult:
    """Availability across all checked extensions for one base name."""
    primary_domain: str
    base_name: str = ''
    available: Dict[str, bool] = field(default_factory=dict)
    prices: Dict[str, float] = field(default_factory=dict)
    sources: Dict[str, str] = field(default_factory=dict)
    recommendations: List[Recommendation] = field(default_factory=list)
    checked_at: str = field(default_factory=utc_now_iso)
    error: bool = False
    message: Optional[str] = None

    @classmethod
    def degraded(cls, name: str, message: str) -> 'DomainAvailabilityResult':
        return cls(
            primary_domain=f"{name}.com",
            base_name=name,
            error=True,
            message=message
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'primary_domain': self.primary_domain,
            'base_name': self.base_name,
            'available': dict(self.available),
            'prices': dict(self.prices),
            'sources': dict(self.sources),
            'recommendations': [r.to_dict() for r in self.recommendations],
            'checked_at': self.checked_at
        }
        if self.error:
            result['error'] = True
            result['message'] = self.message
        return result


@dataclass
class BrandabilityAnalysis:
    """Sub-scores (1-10) and their mean for a single name."""
    length_score: int
    pronunciation_score: int
    memorability_score: int
    uniqueness_score: int
    domain_friendliness: int
    overall_score: float
    recommendations: List[str] = field(default_factory=list)

    def sub_scores(self) -> List[int]:
        return [
            self.length_score,
            self.pronunciation_score,
            self.memorability_score,
            self.uniqueness_score,
            self.domain_friendliness
        ]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class NameCandidate:
    """A generated name, optionally enriched with analysis."""
    name: str
    explanation: str
    brandability_score: float
    concerns: str = ''

    # Enrichment
    domain_info: Optional[DomainAvailabilityResult] = None
    brandability_analysis: Optional[BrandabilityAnalysis] = None
    seo_potential: Optional[int] = None
    trademark_risk: Optional[Dict[str, Any]] = None
    generated_at: Optional[str] = None

    @property
    def enriched(self) -> bool:
        return self.brandability_analysis is not None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'name': self.name,
            'explanation': self.explanation,
            'brandability_score': self.brandability_score,
            'concerns': self.concerns
        }
        if self.domain_info is not None:
            result['domain_info'] = self.domain_info.to_dict()
        if self.brandability_analysis is not None:
            result['brandability_analysis'] = self.brandability_analysis.to_dict()
        if self.seo_potential is not None:
            result['seo_potential'] = self.seo_potential
        if self.trademark_risk is not None:
            result['trademark_risk'] = self.trademark_risk
        if self.generated_at is not None:
            result['generated_at'] = self.generated_at
        return result


class ParseKind(str, Enum):
    STRUCTURED = 'structured'
    FALLBACK = 'fallback'
    EMPTY = 'empty'


@dataclass
class ParseResult:
    """Candidates extracted from a completion, tagged with how they were found."""
    kind: ParseKind
    candidates: List[NameCandidate] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.candidates)


@dataclass
class NameAnalysis:
    """Full report for a user-supplied name."""
    name: str
    domain_analysis: DomainAvailabilityResult
    brandability_analysis: BrandabilityAnalysis
    seo_analysis: Dict[str, int]
    recommendations: List[str] = field(default_factory=list)
    analyzed_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'domain_analysis': self.domain_analysis.to_dict(),
            'brandability_analysis': self.brandability_analysis.to_dict(),
            'seo_analysis': dict(self.seo_analysis),
            'recommendations': list(self.recommendations),
            'analyzed_at': self.analyzed_at
        }
