"""Brandability scoring - five heuristic sub-scores on a 1-10 scale."""

import re
from typing import Any, Dict, List

from ..models import BrandabilityAnalysis


MIN_SCORE = 1
MAX_SCORE = 10


def _clamp(score: float) -> int:
    return int(max(MIN_SCORE, min(MAX_SCORE, score)))


class BrandabilityScorer:
    """Scores names on length, pronunciation, memorability, uniqueness and domain fit.

    Stateless; every method is a pure function of the name.
    """

    VOWELS = set('aeiouy')

    REPEATED_CHAR_RE = re.compile(r"(.)\1{2,}")
    FILLER_PREFIX_RE = re.compile(r"^(get|my|the|app|web)", re.IGNORECASE)
    COMMON_SUFFIX_RE = re.compile(r"(ly|er|ing)$", re.IGNORECASE)
    CAMEL_CASE_RE = re.compile(r"^[A-Z][a-z]+[A-Z][a-z]+$")
    DOMAIN_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9-]")
    LETTERS_ONLY_RE = re.compile(r"^[a-zA-Z]+$")

    # Generic business words that make a name blend in
    GENERIC_WORDS = ('app', 'web', 'tech', 'digital', 'online', 'smart', 'pro', 'max', 'plus')

    # Surface-level trademark heuristics
    MAJOR_BRANDS = ('apple', 'google')
    APPLE_STYLE_RE = re.compile(r"^[ie][A-Z]")

    def _score_length(self, name: str) -> int:
        length = len(name)

        if 5 <= length <= 8:
            return 10
        elif 9 <= length <= 12:
            return 8
        elif 3 <= length <= 4:
            return 7
        elif 13 <= length <= 15:
            return 6
        return 3

    def vowel_ratio(self, name: str) -> float:
        if not name:
            return 0.0
        vowels = sum(1 for c in name.lower() if c in self.VOWELS)
        return vowels / len(name)

    def _score_pronunciation(self, name: str) -> int:
        """Bucket the vowel-to-length ratio."""
        ratio = self.vowel_ratio(name)

        if 0.3 <= ratio <= 0.5:
            return 10
        elif 0.2 <= ratio < 0.3:
            return 8
        elif 0.5 < ratio <= 0.6:
            return 7
        return 5

    def _score_memorability(self, name: str) -> int:
        score = 10

        # Penalize common patterns
        if self.REPEATED_CHAR_RE.search(name):
            score -= 2
        if self.FILLER_PREFIX_RE.match(name):
            score -= 3
        if self.COMMON_SUFFIX_RE.search(name):
            score -= 1

        # Reward memorable patterns
        if self.CAMEL_CASE_RE.match(name):
            score += 2
        lowered = name.lower()
        if 'x' in lowered or 'z' in lowered:
            score += 1

        return _clamp(score)

    def _score_uniqueness(self, name: str) -> int:
        score = 10
        lowered = name.lower()

        for word in self.GENERIC_WORDS:
            if word in lowered:
                score -= 2

        return _clamp(score)

    def _score_domain_friendliness(self, name: str) -> int:
        score = 10

        if self.DOMAIN_UNSAFE_RE.search(name):
            score -= 5
        if '-' in name:
            score -= 2
        if any(c.isdigit() for c in name):
            score -= 1
        if len(name) > 15:
            score -= 3

        return _clamp(score)

    def _recommendations(self, analysis: Dict[str, int]) -> List[str]:
        recommendations = []

        if analysis['length_score'] < 7:
            recommendations.append('Consider shortening the name for better memorability')
        if analysis['pronunciation_score'] < 7:
            recommendations.append('Add more vowels or simplify pronunciation')
        if analysis['uniqueness_score'] < 7:
            recommendations.append('Make the name more distinctive to avoid confusion')

        return recommendations

    def analyze(self, name: str) -> BrandabilityAnalysis:
        """Calculate the full brandability breakdown for a name."""
        sub_scores = {
            'length_score': _clamp(self._score_length(name)),
            'pronunciation_score': _clamp(self._score_pronunciation(name)),
            'memorability_score': self._score_memorability(name),
            'uniqueness_score': self._score_uniqueness(name),
            'domain_friendliness': self._score_domain_friendliness(name)
        }
        overall = sum(sub_scores.values()) / len(sub_scores)

        return BrandabilityAnalysis(
            overall_score=round(overall, 1),
            recommendations=self._recommendations(sub_scores),
            **sub_scores
        )

    def seo_potential(self, name: str) -> int:
        """Rough searchability estimate, 1-10."""
        factors = [
            8 if len(name) <= 12 else 5,                        # brand search potential
            9 if self.LETTERS_ONLY_RE.match(name) else 6,       # type-ability
            self._score_pronunciation(name),                    # voice search
            self._score_memorability(name)                      # backlink recall
        ]
        return round(sum(factors) / len(factors))

    def seo_analysis(self, name: str) -> Dict[str, int]:
        length = len(name)
        if length <= 12:
            length_seo = 9
        elif length <= 15:
            length_seo = 7
        else:
            length_seo = 5

        memorability = 10
        if length > 15:
            memorability -= 3
        if not any(c in 'aeiou' for c in name.lower()):
            memorability -= 2
        if self.REPEATED_CHAR_RE.search(name):
            memorability -= 2

        return {
            'length_seo_score': length_seo,
            'memorability_score': max(MIN_SCORE, memorability),
            'type_ability_score': 10 if self.LETTERS_ONLY_RE.match(name) else 6
        }

    def trademark_risk(self, name: str) -> Dict[str, Any]:
        risk_factors = []
        if any(brand in name.lower() for brand in self.MAJOR_BRANDS):
            risk_factors.append('Contains major brand name')
        if self.APPLE_STYLE_RE.match(name):
            risk_factors.append('Similar to Apple naming convention')

        return {
            'risk_level': 'medium' if risk_factors else 'low',
            'risk_factors': risk_factors,
            'recommendation': 'Conduct trademark search' if risk_factors else 'Proceed with confidence'
        }


_default_scorer = BrandabilityScorer()


def analyze_brandability(name: str) -> BrandabilityAnalysis:
    return _default_scorer.analyze(name)
