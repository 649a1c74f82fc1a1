import pytest

from namecraft.scoring import BrandabilityScorer, analyze_brandability


SAMPLE_NAMES = [
    "Zephyr", "a", "", "GetAppTechPro", "my-web-app-42", "Boooom", "FooBar",
    "Lumina", "x", "superlongnamethatgoesonforever", "Acme Corp!!", "Tappily",
    "bcdfg", "aeiou", "Rhythm",
]


def test_zephyr_scores_perfectly():
    result = analyze_brandability("Zephyr")
    assert result.length_score == 10
    assert result.pronunciation_score == 10
    assert result.memorability_score == 10
    assert result.uniqueness_score == 10
    assert result.domain_friendliness == 10
    assert result.overall_score == 10.0
    assert result.recommendations == []


@pytest.mark.parametrize("name", SAMPLE_NAMES)
def test_sub_scores_in_range_and_overall_is_mean(name):
    result = analyze_brandability(name)
    for score in result.sub_scores():
        assert 1 <= score <= 10
    assert len(result.sub_scores()) == 5
    assert result.overall_score == round(sum(result.sub_scores()) / 5, 1)


@pytest.mark.parametrize("name", SAMPLE_NAMES)
def test_analysis_is_deterministic(name):
    assert analyze_brandability(name) == analyze_brandability(name)


@pytest.mark.parametrize("name,expected", [
    ("abcde", 10), ("abcdefgh", 10),
    ("abcdefghi", 8), ("abcdefghijkl", 8),
    ("abc", 7), ("abcd", 7),
    ("abcdefghijklm", 6), ("abcdefghijklmno", 6),
    ("ab", 3), ("abcdefghijklmnop", 3),
])
def test_length_buckets(name, expected):
    assert analyze_brandability(name).length_score == expected


def test_pronunciation_buckets():
    scorer = BrandabilityScorer()
    assert scorer._score_pronunciation("banana") == 10      # 0.5
    assert scorer._score_pronunciation("bananaa") == 7      # 4/7
    assert scorer._score_pronunciation("bacdfghjke") == 8   # 0.2
    assert scorer._score_pronunciation("bacdfghjkl") == 5   # 0.1
    assert scorer._score_pronunciation("bcdfgh") == 5
    assert scorer._score_pronunciation("aeiob") == 5        # 0.8
    assert scorer._score_pronunciation("") == 5


def test_memorability_penalties_and_bonuses():
    scorer = BrandabilityScorer()
    assert scorer._score_memorability("Boooom") == 8        # run of three o's
    assert scorer._score_memorability("GetThing") < 10      # filler prefix
    assert scorer._score_memorability("Tappily") == 9       # -ly suffix
    assert scorer._score_memorability("FooBar") == 10       # camel case, clamped
    assert scorer._score_memorability("mygetting") == 6     # prefix and -ing suffix


def test_uniqueness_stoplist():
    assert analyze_brandability("Lumina").uniqueness_score == 10
    # app, tech, pro
    assert analyze_brandability("apptechpro").uniqueness_score == 4
    assert analyze_brandability("webappdigitalonlinesmartpromaxplustech").uniqueness_score == 1


def test_domain_friendliness():
    assert analyze_brandability("acme").domain_friendliness == 10
    assert analyze_brandability("acme-co").domain_friendliness == 8
    assert analyze_brandability("acme4").domain_friendliness == 9
    assert analyze_brandability("Acme Corp!!").domain_friendliness == 5
    assert analyze_brandability("a" * 16).domain_friendliness == 7


def test_recommendations_follow_thresholds():
    result = analyze_brandability("webappdigitalonline")
    assert 'Consider shortening the name for better memorability' in result.recommendations
    assert 'Make the name more distinctive to avoid confusion' in result.recommendations

    result = analyze_brandability("bcdfgh")
    assert result.recommendations == ['Add more vowels or simplify pronunciation']


def test_seo_potential():
    scorer = BrandabilityScorer()
    # 8 (short), 9 (letters), 10 (pronunciation), 10 (memorability) -> 9.25
    assert scorer.seo_potential("Zephyr") == 9
    assert 1 <= scorer.seo_potential("my-web-app-42") <= 10


def test_seo_analysis():
    scorer = BrandabilityScorer()
    assert scorer.seo_analysis("Zephyr") == {
        'length_seo_score': 9,
        'memorability_score': 10,
        'type_ability_score': 10,
    }
    seo = scorer.seo_analysis("brrrrrrrrrrrrrrrr")
    assert seo['length_seo_score'] == 5
    assert seo['memorability_score'] == 3


@pytest.mark.parametrize("name,factors", [
    ("Zephyr", []),
    ("GoogleFlow", ['Contains major brand name']),
    ("iCloudly", ['Similar to Apple naming convention']),
    ("eApple", ['Contains major brand name', 'Similar to Apple naming convention']),
    ("ibex", []),
])
def test_trademark_risk(name, factors):
    risk = BrandabilityScorer().trademark_risk(name)
    assert risk['risk_factors'] == factors
    if factors:
        assert risk['risk_level'] == 'medium'
        assert risk['recommendation'] == 'Conduct trademark search'
    else:
        assert risk['risk_level'] == 'low'
        assert risk['recommendation'] == 'Proceed with confidence'
