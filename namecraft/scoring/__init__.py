from .scorer import BrandabilityScorer, analyze_brandability

__all__ = ['BrandabilityScorer', 'analyze_brandability']
