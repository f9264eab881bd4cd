"""
Pydantic models for proficiency thresholds and sentence results
"""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


POS_GROUPS = ("nouns", "verbs", "modifiers", "conjunctions")


class ProficiencyThreshold(BaseModel):
    """
    Acceptance bounds for one proficiency tier
    """
    name: str = Field(description="Tier name, e.g. 'beginner'", min_length=1)
    min_length: Optional[int] = Field(
        default=None,
        description="Minimum number of terms (no lower bound when unset)",
        ge=0
    )
    max_length: int = Field(description="Maximum number of terms", ge=0)
    max_complex_words: int = Field(description="Maximum number of complex words", ge=0)
    required_pos: List[str] = Field(
        default_factory=list,
        description="POS groups that must contain at least one term"
    )

    @field_validator("required_pos")
    @classmethod
    def validate_required_pos(cls, value: List[str]) -> List[str]:
        unknown = [group for group in value if group not in POS_GROUPS]
        if unknown:
            raise ValueError(f"Unknown POS groups: {unknown}")
        return value

    @property
    def lower_bound(self) -> int:
        return self.min_length or 0

    def length_in_bounds(self, count: int) -> bool:
        return self.lower_bound <= count <= self.max_length


class SentenceResult(BaseModel):
    """
    Outcome of one sentence request
    """
    sentence: Optional[str] = Field(
        default=None,
        description="Selected sentence, or None when no candidate qualifies"
    )
    from_cache: bool = Field(description="Whether the candidate list came from the corpus cache")
