from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List, Dict

from prize_selection.config import MAX_SELECTION_COUNT
from prize_selection.models.prize_models import PrizeSelectionRow, SelectionDomain

# -----------------------------
# CATEGORY SPEC INPUT
# -----------------------------

class CategorySpecRequest(BaseModel):
    category_name: str = Field(
        description="Category name, e.g. 'Guaranteed' or 'OffBan 5*'"
    )
    probability_share: float = Field(
        ge=0.0,
        le=1.0,
        description="Share of the roll space for the whole category. "
                    "Split evenly between the category's prizes."
    )
    prize_count: Optional[int] = Field(
        default=None,
        gt=0,
        description="Number of prizes. Names are generated when prize_names is omitted."
    )
    prize_names: Optional[List[str]] = Field(
        default=None,
        description="Explicit prize names. prize_count is derived from these."
    )

    @field_validator("category_name")
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("category_name cannot be blank")
        return v

    @model_validator(mode="after")
    def count_or_names(self):
        if self.prize_count is None and self.prize_names is None:
            raise ValueError("Provide prize_count or prize_names")
        if self.prize_names is not None and len(self.prize_names) == 0:
            raise ValueError("prize_names cannot be empty")
        return self


# -----------------------------
# TABLE VALIDATION
# -----------------------------

class SelectionTableRequest(BaseModel):
    table: List[PrizeSelectionRow] = Field(
        description="Probability table to check, top row first."
    )


# -----------------------------
# SELECTION REQUEST
# -----------------------------

class SelectionRequest(BaseModel):
    selection_domains: List[SelectionDomain] = Field(
        min_length=1,
        description="Domains drawn from in one selection operation."
    )
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed for deterministic results. "
                    "Same seed always produces the same selections."
    )


# -----------------------------
# SUCCESS CALCULATION REQUEST
# -----------------------------

class SuccessCalculationRequest(SelectionRequest):
    success_criteria: Dict[int, int] = Field(
        min_length=1,
        description="Prize index (1-based, result table order) -> minimum selected count. 0 = don't care."
    )
    selection_count: int = Field(
        default=1,
        ge=1,
        description=f"Selections per trial. Max: {MAX_SELECTION_COUNT}"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "success_criteria": {"1": 1, "2": 1, "3": 0, "4": 0},
                "selection_count": 5,
                "seed": 1,
                "selection_domains": [
                    {
                        "name": "Guaranteed",
                        "draw_count": 1,
                        "table": [
                            {"prize_index": 1, "lower_bound": 0.75, "category_name": "Rare", "prize_name": "Sword"},
                            {"prize_index": 2, "lower_bound": 0.5, "category_name": "Rare", "prize_name": "Spear"},
                            {"prize_index": 3, "lower_bound": 0.25, "category_name": "Rare", "prize_name": "Dagger"},
                            {"prize_index": 4, "lower_bound": 0.0, "category_name": "Rare", "prize_name": "Bow"},
                        ]
                    }
                ]
            }
        }
    }


class SubsetSuccessCalculationRequest(SuccessCalculationRequest):
    subset_size: int = Field(
        ge=1,
        description="How many of the required prizes must be met. "
                    "Must be smaller than the number of non-zero criteria."
    )
