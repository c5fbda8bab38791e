"""Tests for keyword sentiment and activity analysis."""

import pytest

from nightbuzz.models import ActivityLevel, SentimentLabel
from nightbuzz.social.sentiment import analyze_activity_level, analyze_sentiment, extract_vibes


def test_empty_text_is_neutral() -> None:
    """Empty input degrades to a neutral result instead of raising."""
    for text in ["", "   ", None]:
        result = analyze_sentiment(text)
        assert result.score == 0.0
        assert result.label == SentimentLabel.NEUTRAL
        assert result.confidence == 1.0
        assert result.keywords == []


def test_positive_text() -> None:
    """Positive keywords produce a positive label."""
    result = analyze_sentiment("This place is amazing")

    assert result.score == pytest.approx(1.0)
    assert result.label == SentimentLabel.POSITIVE
    assert result.confidence == 1.0
    assert result.keywords == ["amazing"]


def test_negation_flips_next_sentiment_word() -> None:
    """A negation word inverts the polarity of the following sentiment word."""
    assert analyze_sentiment("not good").label == SentimentLabel.NEGATIVE
    assert analyze_sentiment("not bad").label == SentimentLabel.POSITIVE
    assert analyze_sentiment("didn't love it").label == SentimentLabel.NEGATIVE


def test_negation_skips_filler_words() -> None:
    """Negation carries over words that carry no sentiment."""
    result = analyze_sentiment("not the best")
    assert result.label == SentimentLabel.NEGATIVE


def test_negation_resets_after_use() -> None:
    """Only the first sentiment word after a negation is flipped."""
    result = analyze_sentiment("not bad, great drinks")
    assert result.score == pytest.approx(1.0)


def test_amplifier_strengthens_next_word() -> None:
    """Amplified sentiment words count for more."""
    plain = analyze_sentiment("good, rude")
    amplified = analyze_sentiment("really good, rude")

    assert plain.label == SentimentLabel.NEUTRAL
    assert amplified.score > plain.score


def test_activity_words_use_up_modifiers() -> None:
    """An amplifier or negation applies to the next scored word, activity words included."""
    amplified = analyze_sentiment("really busy, good, rude")
    negated = analyze_sentiment("wasn't busy, good")

    # busy 0.5 * 1.5 + good 1 against rude 1
    assert amplified.score == pytest.approx(0.75 / 2.75)
    assert negated.score == pytest.approx(1.0)


def test_emojis_count_toward_sentiment() -> None:
    """Each emoji occurrence adds to the tally."""
    assert analyze_sentiment("🔥🔥").label == SentimentLabel.POSITIVE
    assert analyze_sentiment("👎").label == SentimentLabel.NEGATIVE


def test_mixed_text_is_neutral_with_low_confidence_penalty() -> None:
    """Balanced text is neutral and confidence falls as the score leaves zero."""
    result = analyze_sentiment("good drinks, rude staff")

    assert result.label == SentimentLabel.NEUTRAL
    assert result.confidence == pytest.approx(1 - 2 * abs(result.score))


def test_keywords_are_deduplicated_and_capped() -> None:
    """Detected keywords are unique and at most ten."""
    text = "great great awesome fun cozy chill classy nice cool tasty yummy solid epic"
    result = analyze_sentiment(text)

    assert len(result.keywords) == 10
    assert len(set(result.keywords)) == 10
    assert result.keywords[0] == "great"


def test_score_always_in_range() -> None:
    """Scores stay within [-1, 1] for arbitrary text."""
    for text in ["!!!", "terrible awful 👎👎", "love love love 🔥", "1234 ???"]:
        assert -1.0 <= analyze_sentiment(text).score <= 1.0


def test_activity_defaults_to_busy() -> None:
    """Text with no indicators sits at the midpoint."""
    result = analyze_activity_level("")
    assert result.score == 50
    assert result.level == ActivityLevel.BUSY


def test_activity_packed_with_line() -> None:
    """High-activity words and a mentioned line push activity up."""
    result = analyze_activity_level("It's packed, line out the door")

    assert result.score == 90
    assert result.level == ActivityLevel.EXPLODING
    assert "wait mentioned" in result.indicators


def test_activity_no_line_is_not_a_wait() -> None:
    """"no line" does not count as a wait."""
    result = analyze_activity_level("no line at all")

    assert result.score == 60
    assert "wait mentioned" not in result.indicators


def test_activity_low_keywords() -> None:
    """Low-activity words pull activity down."""
    result = analyze_activity_level("dead and empty tonight")
    assert result.score == 20
    assert result.level == ActivityLevel.SLOW


def test_activity_clamped_at_zero() -> None:
    """Activity never drops below zero."""
    result = analyze_activity_level("dead empty quiet slow boring lame")
    assert result.score == 0
    assert result.level == ActivityLevel.DEAD


@pytest.mark.parametrize(
    "text,expected",
    [
        ("25 people here", 75),
        ("12 people here", 65),
        ("5 people here", 50),
    ],
)
def test_activity_people_counts(text: str, expected: float) -> None:
    """Large groups raise activity."""
    assert analyze_activity_level(text).score == expected


def test_activity_matches_whole_words_only() -> None:
    """Keywords match on word boundaries, so "online" is not a line."""
    assert analyze_activity_level("ordered online").score == 50


def test_extract_vibes() -> None:
    """Vibe tags are picked up from atmosphere words."""
    vibes = extract_vibes("Great DJ and a dance floor, super classy crowd")

    assert "party" in vibes
    assert "classy" in vibes
    assert extract_vibes("") == []
