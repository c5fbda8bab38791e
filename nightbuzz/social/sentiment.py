"""
Keyword Sentiment Analysis
==========================
Lightweight, dependency-free sentiment and activity scoring for nightlife
posts. Pure functions: empty or garbled text degrades to neutral results.
"""

import re
from typing import List

from nightbuzz.models import ActivityLevel, ActivityResult, SentimentLabel, SentimentResult

from .constants import ACTIVITY_BREAKPOINTS, HIGH_ACTIVITY_KEYWORDS, LOW_ACTIVITY_KEYWORDS

POSITIVE_KEYWORDS = frozenset({
    # General
    "amazing", "awesome", "best", "love", "loved", "loving", "great", "perfect",
    "incredible", "fantastic", "wonderful", "excellent", "outstanding", "brilliant",
    "superb", "phenomenal", "exceptional", "magnificent", "sublime", "divine",
    # Fun / party
    "fun", "lit", "fire", "vibes", "vibe", "vibey", "vibin", "hype", "hyped",
    "popping", "poppin", "turnt", "turnup", "wild", "crazy", "insane", "epic",
    "legendary", "iconic", "unforgettable", "memorable", "unreal", "dope",
    # Social
    "friends", "squad", "crew", "fam", "family", "bday", "birthday", "celebrate",
    "celebration", "cheers", "toast", "toasting", "party", "partying",
    # Quality
    "delicious", "tasty", "yummy", "good", "nice", "cool", "chill", "solid",
    "quality", "classy", "fancy", "upscale", "premium", "crafted", "artisan",
    # Recommendations
    "recommend", "recommended", "must", "favorite", "fave", "goat", "goated",
    "comeback", "return", "returning", "again", "always", "obsessed",
    # Atmosphere
    "beautiful", "gorgeous", "stunning", "cozy", "intimate", "romantic",
    "aesthetic", "instagrammable", "photogenic", "scenic", "view", "views",
    # Service
    "friendly", "welcoming", "helpful", "attentive", "quick", "fast",
    "professional", "courteous", "knowledgeable", "expert",
})

NEGATIVE_KEYWORDS = frozenset({
    # General
    "bad", "terrible", "awful", "horrible", "worst", "hate", "hated", "hating",
    "disappointing", "disappointed", "disappoints", "trash", "garbage", "waste",
    "regret", "mistake", "avoid", "skip", "pass", "overrated",
    # Service
    "rude", "slow", "ignored", "waited", "waiting", "forever", "hours",
    "unprofessional", "disrespectful", "dismissive", "careless", "neglected",
    # Quality
    "weak", "watered", "overpriced", "expensive", "ripoff", "scam",
    "stale", "cold", "warm", "gross", "nasty", "disgusting",
    # Atmosphere
    "empty", "dead", "boring", "lame", "quiet", "ghost", "crickets",
    "loud", "noisy", "crowded", "packed", "stuffed", "cramped", "tiny",
    "dirty", "filthy", "sticky", "smelly", "sketchy", "unsafe",
    # Experience
    "fight", "fighting", "drama", "kicked", "bounced", "refused", "denied",
    "sick", "ill", "poisoned", "hangover", "regrets",
})

POSITIVE_EMOJIS = ["🔥", "❤️", "😍", "🥰", "💯", "👏", "🙌", "✨", "💫", "🎉", "🍻", "🥂"]
NEGATIVE_EMOJIS = ["👎", "💀", "😤", "😡", "🤮", "👻"]
EMOJI_WEIGHT = 0.5

INTENSITY_AMPLIFIERS = frozenset({
    "very", "really", "so", "super", "extremely", "absolutely", "totally",
    "completely", "utterly", "seriously", "literally", "genuinely", "truly",
    "honestly", "actually", "definitely", "certainly", "undoubtedly",
})
AMPLIFIER_MULTIPLIER = 1.5

NEGATION_WORDS = frozenset({
    "not", "no", "never", "none", "neither", "nobody", "nothing", "nowhere",
    "without", "cant", "cannot",
})

HIGH_ACTIVITY_WORDS = frozenset(k for k in HIGH_ACTIVITY_KEYWORDS if " " not in k)
LOW_ACTIVITY_WORDS = frozenset(k for k in LOW_ACTIVITY_KEYWORDS if " " not in k)
HIGH_ACTIVITY_WEIGHT = 0.5
LOW_ACTIVITY_WEIGHT = 0.3

NEUTRAL_BAND = 0.2
MAX_KEYWORDS = 10

VIBE_KEYWORDS = {
    "chill": ["chill", "relaxed", "relaxing", "calm", "mellow", "lowkey", "laid back", "cozy"],
    "energetic": ["hype", "hyped", "energy", "energetic", "wild", "crazy", "turnt", "lit"],
    "classy": ["classy", "upscale", "fancy", "elegant", "sophisticated", "refined", "posh"],
    "casual": ["casual", "dive", "neighborhood", "local", "friendly", "welcoming"],
    "romantic": ["romantic", "intimate", "date", "couples", "candlelit", "cozy"],
    "party": ["party", "dancing", "dance floor", "dj", "club", "clubbing", "rave"],
    "live music": ["live music", "band", "concert", "acoustic", "jazz", "blues"],
    "sports": ["sports", "game", "football", "basketball", "ufc", "fight"],
    "trendy": ["trendy", "hip", "cool", "instagram", "influencer", "aesthetic"],
}

_LINE_PATTERN = re.compile(r"\b(line|wait|queue|door)\b")
_NO_LINE_PATTERN = re.compile(r"\bno (line|wait)\b")
_PEOPLE_PATTERN = re.compile(r"\b(\d+)\s*(people|folks|friends|crew)\b")


def _is_negation(word: str) -> bool:
    return word in NEGATION_WORDS or word.endswith("n't")


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def analyze_sentiment(text: str) -> SentimentResult:
    """Score text from -1 (negative) to 1 (positive).

    A negation word flips the polarity of the next sentiment word; an
    amplifier scales the next sentiment word by 1.5. Both reset once a scored
    word, activity words included, has been consumed. Activity words are
    never flipped by a negation.
    """
    if not text or not text.strip():
        return SentimentResult()

    positive = 0.0
    negative = 0.0
    detected: List[str] = []

    negation_active = False
    intensity = 1.0

    for token in text.lower().split():
        word = re.sub(r"[^\w']", "", token)
        if not word:
            continue

        if _is_negation(word):
            negation_active = True
            continue

        word = word.replace("'", "")
        if word in INTENSITY_AMPLIFIERS:
            intensity = AMPLIFIER_MULTIPLIER
            continue

        is_positive = word in POSITIVE_KEYWORDS
        is_negative = word in NEGATIVE_KEYWORDS

        if is_positive:
            if negation_active:
                negative += intensity
            else:
                positive += intensity
            detected.append(word)

        if is_negative:
            if negation_active:
                positive += intensity
            else:
                negative += intensity
            detected.append(word)

        # Busy is good news for a bar, quiet is mildly bad
        is_high = word in HIGH_ACTIVITY_WORDS
        is_low = word in LOW_ACTIVITY_WORDS
        if is_high:
            positive += HIGH_ACTIVITY_WEIGHT * intensity
            detected.append(word)
        if is_low:
            negative += LOW_ACTIVITY_WEIGHT * intensity
            detected.append(word)

        # Any scored word, activity words included, uses up pending modifiers
        if is_positive or is_negative or is_high or is_low:
            negation_active = False
            intensity = 1.0

    for emoji in POSITIVE_EMOJIS:
        positive += text.count(emoji) * EMOJI_WEIGHT
    for emoji in NEGATIVE_EMOJIS:
        negative += text.count(emoji) * EMOJI_WEIGHT

    total = positive + negative
    score = (positive - negative) / total if total > 0 else 0.0

    if abs(score) < NEUTRAL_BAND:
        label = SentimentLabel.NEUTRAL
        confidence = 1 - abs(score) * 2
    elif score > 0:
        label = SentimentLabel.POSITIVE
        confidence = min(1.0, score + 0.3)
    else:
        label = SentimentLabel.NEGATIVE
        confidence = min(1.0, abs(score) + 0.3)

    return SentimentResult(
        score=score,
        label=label,
        confidence=confidence,
        keywords=_unique(detected)[:MAX_KEYWORDS],
    )


def _activity_level(score: float) -> ActivityLevel:
    for lower_bound, level in ACTIVITY_BREAKPOINTS:
        if score >= lower_bound:
            return ActivityLevel(level)
    return ActivityLevel.DEAD


def analyze_activity_level(text: str) -> ActivityResult:
    """Estimate how busy a venue sounds, 0 (dead) to 100 (exploding)."""
    normalized = (text or "").lower()
    indicators: List[str] = []
    score = 50.0

    for keyword in HIGH_ACTIVITY_KEYWORDS:
        if re.search(rf"\b{re.escape(keyword)}\b", normalized):
            score += 10
            indicators.append(keyword)

    for keyword in LOW_ACTIVITY_KEYWORDS:
        if re.search(rf"\b{re.escape(keyword)}\b", normalized):
            score -= 15
            indicators.append(keyword)

    if _LINE_PATTERN.search(normalized) and not _NO_LINE_PATTERN.search(normalized):
        score += 20
        indicators.append("wait mentioned")

    people = _PEOPLE_PATTERN.search(normalized)
    if people:
        count = int(people.group(1))
        if count > 20:
            score += 25
            indicators.append(f"{count} people")
        elif count > 10:
            score += 15
            indicators.append(f"{count} people")

    score = max(0.0, min(100.0, score))
    return ActivityResult(level=_activity_level(score), score=score, indicators=_unique(indicators))


def extract_vibes(text: str) -> List[str]:
    """Tag text with atmosphere labels such as "chill" or "party"."""
    normalized = (text or "").lower()
    vibes = []
    for vibe, keywords in VIBE_KEYWORDS.items():
        if any(keyword in normalized for keyword in keywords):
            vibes.append(vibe)
    return vibes
