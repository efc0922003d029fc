# FILE: grouping_core/models.py
from __future__ import annotations
from typing import Dict, List, Literal, Optional, Set
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    category: Literal["boy", "girl"] = "boy"
    special_needs: bool = False
    behavior_note: bool = False
    level: int = Field(default=1, ge=1, le=4)
    preferred_names: List[str] = Field(default_factory=list)


class SummaryStat(BaseModel):
    group_a: int
    group_b: int
    balance: int


class ImbalanceBreakdown(BaseModel):
    category: int = 0
    special_needs: int = 0
    behavior: int = 0
    level: int = 0
    preference: int = 0

    @property
    def total(self) -> int:
        return self.category + self.special_needs + self.behavior + self.level + self.preference


class SplitResult(BaseModel):
    group_a: List[Person] = Field(default_factory=list)
    group_b: List[Person] = Field(default_factory=list)
    score: int = 0
    unmet_in_a: Set[int] = Field(default_factory=set)
    unmet_in_b: Set[int] = Field(default_factory=set)
    summary: Dict[str, SummaryStat] = Field(default_factory=dict)
    notes: List[str] = Field(default_factory=list)
    breakdown: ImbalanceBreakdown = Field(default_factory=ImbalanceBreakdown)


class RosterState(BaseModel):
    people: List[Person] = Field(default_factory=list)
    next_id: int = Field(default=1, ge=1)


class AppConfig(BaseModel):
    max_people: int = 26
    batch_size: int = 4096
    time_limit_s: Optional[float] = None
    log_level: str = "INFO"
    store_path: str = "assets/people.json"

    @field_validator("max_people", "batch_size")
    @classmethod
    def _positive(cls, v):
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("time_limit_s")
    @classmethod
    def _positive_limit(cls, v):
        if v is not None and v <= 0:
            raise ValueError("time_limit_s must be positive when set")
        return v
