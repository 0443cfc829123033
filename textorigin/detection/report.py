"""Module turning features into human-readable evidence and advice."""

from typing import Final

from textorigin.data_models import FeatureSet

# Flags are raised below/above these values.
LOW_BURSTINESS_STD_DEV: Final = 6.0
HIGH_BUZZWORD_COUNT: Final = 2
LOW_TYPE_TOKEN_RATIO: Final = 0.4

NO_ANOMALIES_FLAG: Final = "No significant AI anomalies detected"

AI_HEADLINE: Final = "Likely AI-Generated Pattern"
HUMAN_HEADLINE: Final = "Likely Human-Written"

AI_SUMMARY: Final = (
    "The text exhibits characteristic uniformity in sentence structure and a high "
    "frequency of generic professional keywords often associated with AI language "
    "models."
)
HUMAN_SUMMARY: Final = (
    "The writing exhibits natural variance in sentence length and vocabulary usage, "
    "suggesting authentic human composition with a unique personal voice."
)

AI_SUGGESTIONS: Final = (
    "Vary your sentence lengths significantly",
    "Replace generic buzzwords (e.g., 'leveraged') with specific actions",
    "Add personal anecdotes or gritty details",
)
HUMAN_SUGGESTIONS: Final = (
    "Maintain this natural tone",
    "Ensure specific metrics are included to back up claims",
)


def generate_flags(features: FeatureSet) -> list[str]:
    """
    Describe anomalies typical for LLM-written texts found in the features.

    Args:
        features (FeatureSet): Features of the text.

    Returns:
        list[str]: Flags in a fixed order. Never empty, a text without anomalies
            gets the single `NO_ANOMALIES_FLAG`.
    """
    flags = []
    if features.sentence_length_std_dev < LOW_BURSTINESS_STD_DEV:
        flags.append("Monotonic sentence structure (Low Burstiness)")
    if features.buzzword_count > HIGH_BUZZWORD_COUNT:
        flags.append(f"High density of buzzwords ({features.buzzword_count} found)")
    if features.type_token_ratio < LOW_TYPE_TOKEN_RATIO:
        flags.append("Repetitive vocabulary usage")
    return flags or [NO_ANOMALIES_FLAG]


def get_suggestions(*, is_ai_generated: bool) -> list[str]:
    """Get advice on making a text read as more human."""
    return list(AI_SUGGESTIONS if is_ai_generated else HUMAN_SUGGESTIONS)


def get_verdict(*, is_ai_generated: bool) -> tuple[str, str]:
    """
    Get a headline and a summary of the verdict.

    Args:
        is_ai_generated (bool): Whether the text was classified as LLM-written.

    Returns:
        tuple[str, str]: The headline and the summary.
    """
    if is_ai_generated:
        return AI_HEADLINE, AI_SUMMARY
    return HUMAN_HEADLINE, HUMAN_SUMMARY
