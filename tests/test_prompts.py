import pytest

from namecraft.exceptions import InvalidRequestError
from namecraft.generators.prompts import (
    EXPERT_PREAMBLE, INDUSTRY_GUIDANCE, STYLE_GUIDANCE, build_prompt, validate_request,
)


def test_prompt_contains_all_blocks():
    prompt = build_prompt(["cloud", "storage"], "saas", "modern", 25)
    assert prompt.startswith(EXPERT_PREAMBLE)
    assert "Keywords: cloud, storage" in prompt
    assert INDUSTRY_GUIDANCE["saas"] in prompt
    assert STYLE_GUIDANCE["modern"] in prompt
    assert "Generate exactly 25 startup names" in prompt
    for field in ("name", "explanation", "brandability_score", "concerns"):
        assert field in prompt


def test_unknown_industry_and_style_fall_back_to_empty_guidance():
    prompt = build_prompt(["pets"], "space-mining", "baroque", 10)
    assert "Industry focus: \n" in prompt
    assert "Style approach: \n" in prompt


def test_prompt_is_deterministic():
    args = (["cloud"], "tech", "creative", 10)
    assert build_prompt(*args) == build_prompt(*args)


def test_validate_accepts_defaults():
    validate_request(["cloud"], "tech", "modern", 50)


@pytest.mark.parametrize("keywords,industry,style,count", [
    ([], "tech", "modern", 50),
    (["a", "b", "c", "d", "e", "f"], "tech", "modern", 50),
    (["x"], "tech", "modern", 50),
    (["bad!keyword"], "tech", "modern", 50),
    (["cloud"], "mining", "modern", 50),
    (["cloud"], "tech", "baroque", 50),
    (["cloud"], "tech", "modern", 5),
    (["cloud"], "tech", "modern", 101),
])
def test_validate_rejects(keywords, industry, style, count):
    with pytest.raises(InvalidRequestError):
        validate_request(keywords, industry, style, count)
