"""Module with project-wide data models."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Percentage = float


class FeatureSet(BaseModel):
    """Linguistic statistics of a single text."""

    sentence_lengths: list[int]
    average_sentence_length: float
    sentence_length_variance: float
    sentence_length_std_dev: float
    burstiness_score: Percentage = Field(..., ge=0.0, le=100.0)

    word_count: int = Field(..., ge=0)
    unique_word_count: int = Field(..., ge=0)
    type_token_ratio: float = Field(..., ge=0.0, le=1.0)
    vocabulary_richness_score: Percentage = Field(..., ge=0.0, le=100.0)

    buzzword_count: int = Field(..., ge=0)
    buzzword_density: float = Field(..., ge=0.0)
    buzzwords_found: list[str] = []

    model_config = ConfigDict(frozen=True)


class Score(BaseModel):
    """Unrounded outcome of the heuristic scoring formula."""

    ai_score: Percentage = Field(..., ge=5.0, le=98.0)
    jitter: float

    model_config = ConfigDict(frozen=True)

    @property
    def human_score(self) -> Percentage:
        """
        Get the complement of the AI score.

        Returns:
            Percentage: `100 - ai_score`.
        """
        return 100.0 - self.ai_score


class _CamelCaseModel(BaseModel):
    """Immutable model serialised with camelCase keys for presentation layers."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class LinguisticAnalysis(_CamelCaseModel):
    """Display-facing sub-scores of an analysis."""

    perplexity_score: int = Field(..., ge=0, le=100)
    burstiness_score: int = Field(..., ge=0, le=100)
    vocabulary_richness: int = Field(..., ge=0, le=100)
    sentence_variety: int = Field(..., ge=0, le=100)


class AnalysisResult(_CamelCaseModel):
    """Outcome of analysing a text, ready to be rendered."""

    is_ai_generated: bool
    ai_probability: int = Field(..., ge=5, le=98)
    human_probability: int = Field(..., ge=2, le=95)
    verdict_headline: str
    summary: str
    linguistic_analysis: LinguisticAnalysis
    flags: list[str] = Field(..., min_length=1)
    suggestions: list[str]

    @model_validator(mode="after")
    def validate_probabilities_sum(self) -> Self:
        """Validate whether both probabilities sum up to 100."""
        total = self.ai_probability + self.human_probability
        if total != 100:  # noqa: PLR2004
            raise ValueError(
                "AI and human probabilities have to sum up to 100 "
                f"but they sum up to {total}."
            )
        return self
