"""End-to-end name generation: prompt, completion, parsing and enrichment."""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from ..checkers import AvailabilityService
from ..config import EngineConfig
from ..models import DomainAvailabilityResult, NameAnalysis, NameCandidate, utc_now_iso
from ..scoring import BrandabilityScorer
from .completion import CompletionClient, OpenAIProvider
from .parser import parse_response
from .prompts import DEFAULT_COUNT, DEFAULT_INDUSTRY, DEFAULT_STYLE, build_prompt, validate_request

logger = logging.getLogger(__name__)


class NameGenerator:
    """Generates names with a completion provider and enriches each one.

    Only a completion failure aborts a request. Parsing and domain lookups
    degrade instead of raising.
    """

    def __init__(
        self,
        completion_client: Optional[CompletionClient] = None,
        availability: Optional[AvailabilityService] = None,
        scorer: Optional[BrandabilityScorer] = None,
        config: Optional[EngineConfig] = None
    ):
        self.config = config or EngineConfig()
        self.completion_client = completion_client or CompletionClient(
            OpenAIProvider(model=self.config.model, temperature=self.config.temperature),
            timeout=self.config.completion_timeout,
            max_retries=self.config.max_retries,
            backoff_base=self.config.backoff_base,
            max_tokens=self.config.max_tokens
        )
        self.availability = availability or AvailabilityService(config=self.config)
        self.scorer = scorer or BrandabilityScorer()

    async def generate_names(
        self,
        keywords: Sequence[str],
        industry: str = DEFAULT_INDUSTRY,
        style: str = DEFAULT_STYLE,
        count: int = DEFAULT_COUNT
    ) -> List[NameCandidate]:
        validate_request(keywords, industry, style, count)
        logger.info(f"Starting name generation: {', '.join(keywords)} | {industry} | {style} | {count}")

        prompt = build_prompt(keywords, industry, style, count)
        raw = await self.completion_client.call_provider(prompt)

        parsed = parse_response(raw)
        logger.info(f"Parsed {len(parsed)} candidates ({parsed.kind.value})")

        enhanced = await self.enhance_names(parsed.candidates)
        logger.info(f"Successfully generated {len(enhanced)} names")
        return enhanced

    async def enhance_names(self, names: Sequence[NameCandidate]) -> List[NameCandidate]:
        """Attach domain, brandability and trademark data, then rank by provider score."""
        enhanced = []

        for candidate in names:
            try:
                domain_info = await self.availability.check_availability(candidate.name)
            except Exception as e:
                logger.warning(f"Failed to enhance name '{candidate.name}': {e}")
                domain_info = DomainAvailabilityResult.degraded(candidate.name, 'Domain check failed')

            enhanced.append(replace(
                candidate,
                domain_info=domain_info,
                brandability_analysis=self.scorer.analyze(candidate.name),
                seo_potential=self.scorer.seo_potential(candidate.name),
                trademark_risk=self.scorer.trademark_risk(candidate.name),
                generated_at=utc_now_iso()
            ))

        # Provider score, not overall_score: the two are kept as separate signals
        enhanced.sort(key=lambda c: c.brandability_score, reverse=True)
        return enhanced

    async def analyze_name(self, name: str) -> NameAnalysis:
        """Domain, brandability and SEO report for a user-supplied name."""
        domain_info = await self.availability.check_availability(name)
        brandability = self.scorer.analyze(name)

        recommendations = []
        if not domain_info.available.get('.com'):
            recommendations.append('Consider name variations - .com domain not available')
        if brandability.overall_score < 6:
            recommendations.append('Name could be more brandable - consider simplifying')
        if len(name) > 12:
            recommendations.append('Shorter names are often more memorable and brandable')

        return NameAnalysis(
            name=name,
            domain_analysis=domain_info,
            brandability_analysis=brandability,
            seo_analysis=self.scorer.seo_analysis(name),
            recommendations=recommendations
        )
