"""Prompt construction for the completion provider."""

import re
from typing import Sequence

from ..exceptions import InvalidRequestError


SYSTEM_PROMPT = "You are a world-class startup naming consultant with 20+ years of experience."

EXPERT_PREAMBLE = """You are a world-class startup naming consultant with 20+ years of experience helping entrepreneurs create memorable, brandable names. You understand the psychology of naming, domain considerations, trademark implications, and global market appeal.

Your expertise includes:
- Phonetic analysis and pronunciation ease
- Cross-cultural naming considerations
- Domain availability optimization
- Trademark-friendly naming patterns
- Industry-specific naming conventions
- Psychological impact of names on customers
- Brandability and memorability factors

Generate startup names that are:
- Memorable and easy to pronounce
- Brandable with strong commercial appeal
- Likely to have domain availability
- Trademark-friendly and legally defensible
- Globally appropriate and culturally sensitive
- Scalable for future business expansion"""

INDUSTRY_GUIDANCE = {
    'tech': """Technology startups require names that convey innovation, reliability, and forward-thinking. Successful patterns include:
- Short, punchy names (Google, Uber, Zoom)
- Tech-friendly suffixes (-ly, -ify, -tech)
- Made-up but memorable words (Spotify, Skype)
- Avoid: Generic tech terms, complex spellings, hard pronunciations""",

    'health': """Healthcare startups need names that inspire trust, professionalism, and care. Consider:
- Medical/health associations without being clinical
- Trust-building elements (Care, Health, Plus)
- Professional tone while remaining approachable
- Avoid: Scary medical terms, overly casual names""",

    'fintech': """Financial technology requires names that convey security, trust, and innovation:
- Financial metaphors (Mint, Square, Stripe)
- Trust-building elements without being boring
- Modern feel with stability implications
- Avoid: Risky or playful associations that reduce credibility""",

    'ecommerce': """E-commerce platforms need globally appealing, marketplace-friendly names:
- Easy to type and remember
- International scalability
- Commerce/marketplace implications
- Avoid: Geographic limitations, complex spelling""",

    'saas': """Software-as-a-Service names should be professional and solution-focused:
- Problem-solving implications
- B2B professional tone
- Scalability considerations
- Avoid: Consumer-focused or trendy slang""",

    'education': """Education technology needs approachable, trustworthy names:
- Learning and growth associations
- Accessible to diverse audiences
- Professional yet friendly tone
- Avoid: Childish or overly academic terms""",

    'food': """Food and beverage startups benefit from appetite appeal:
- Sensory and emotional connections
- Cultural considerations for global appeal
- Fresh and appetizing implications
- Avoid: Complex pronunciations in dining context""",

    'travel': """Travel and hospitality names should evoke wanderlust and experience:
- Adventure and exploration themes
- Global accessibility and pronunciation
- Experience and journey implications
- Avoid: Geographic limitations, complex cultural references""",
}

STYLE_GUIDANCE = {
    'modern': """Modern naming style focuses on:
- Clean, minimalist approach
- Tech-friendly and digital-native feel
- Contemporary sound patterns
- Streamlined and efficient branding potential""",

    'classic': """Classic naming emphasizes:
- Timeless appeal and longevity
- Professional and established feel
- Traditional business naming conventions
- Credibility and trust-building elements""",

    'creative': """Creative naming allows for:
- Unique and distinctive approaches
- Playful wordplay and combinations
- Memorable and conversation-starting names
- Bold and differentiated branding opportunities""",

    'professional': """Professional naming prioritizes:
- Business credibility and authority
- Industry-appropriate tone
- Corporate and institutional appeal
- Serious and trustworthy positioning""",
}

INDUSTRIES = tuple(INDUSTRY_GUIDANCE)
STYLES = tuple(STYLE_GUIDANCE)

DEFAULT_INDUSTRY = 'tech'
DEFAULT_STYLE = 'modern'
DEFAULT_COUNT = 50

MIN_KEYWORDS, MAX_KEYWORDS = 1, 5
MIN_COUNT, MAX_COUNT = 10, 100

KEYWORD_RE = re.compile(r"^[a-zA-Z0-9\s-]{2,30}$")


def validate_request(keywords: Sequence[str], industry: str, style: str, count: int):
    """Raise InvalidRequestError for out-of-range generation parameters."""
    if not MIN_KEYWORDS <= len(keywords) <= MAX_KEYWORDS:
        raise InvalidRequestError(f"Keywords must be a list with {MIN_KEYWORDS}-{MAX_KEYWORDS} items")

    for keyword in keywords:
        if not isinstance(keyword, str) or not KEYWORD_RE.match(keyword):
            raise InvalidRequestError(f"Invalid keyword {keyword!r}: 2-30 characters, alphanumeric only")

    if industry not in INDUSTRY_GUIDANCE:
        raise InvalidRequestError(f"Invalid industry {industry!r}; choose from {', '.join(INDUSTRIES)}")

    if style not in STYLE_GUIDANCE:
        raise InvalidRequestError(f"Invalid style {style!r}; choose from {', '.join(STYLES)}")

    if isinstance(count, bool) or not isinstance(count, int) or not MIN_COUNT <= count <= MAX_COUNT:
        raise InvalidRequestError(f"Count must be between {MIN_COUNT} and {MAX_COUNT}")


def build_prompt(keywords: Sequence[str], industry: str, style: str, count: int) -> str:
    industry_context = INDUSTRY_GUIDANCE.get(industry, '')
    style_context = STYLE_GUIDANCE.get(style, '')

    return f"""{EXPERT_PREAMBLE}

CONTEXT:
- Keywords: {', '.join(keywords)}
- Industry: {industry}
- Style: {style}
- Industry focus: {industry_context}
- Style approach: {style_context}

Generate exactly {count} startup names. For each name, provide:
1. The name itself
2. A brief explanation (1-2 sentences) of why it works
3. A brandability score (1-10)
4. Potential concerns or considerations

Format as a JSON object with a single key "names" holding an array of objects with the fields: name, explanation, brandability_score, concerns

Remember: Prioritize names likely to have .com domain availability."""
