from pydantic import BaseModel, Field, model_validator
from typing import List


class PrizeCategorySpec(BaseModel):
    category_name: str = Field(..., description="Name of the prize category")
    probability_share: float = Field(..., ge=0.0, le=1.0, description="Share of the [0,1) roll space for the whole category")
    prize_count: int = Field(..., gt=0, description="Number of prizes in the category")
    prize_names: List[str] = Field(..., description="One name per prize, top of the category first")

    @model_validator(mode="after")
    def names_match_count(self):
        if len(self.prize_names) != self.prize_count:
            raise ValueError(
                f"prize_count ({self.prize_count}) does not match number of prize_names ({len(self.prize_names)})"
            )
        return self


class PrizeSelectionRow(BaseModel):
    prize_index: int = Field(..., description="1-based position in the table")
    lower_bound: float = Field(..., description="Lowest roll that selects this prize")
    category_name: str
    prize_name: str


class SelectionDomain(BaseModel):
    name: str
    draw_count: int = Field(..., description="Draws taken from this table per selection")
    table: List[PrizeSelectionRow]


class PrizeResultRow(BaseModel):
    prize_index: int
    category_name: str
    prize_name: str
    selected_count: int = 0


class SuccessInfo(BaseModel):
    trials_conducted: int
    min_pulls_required: int
    max_pulls_required: int
    mean_pulls_required: float
    median_pulls_required: float
    mode_pulls_required: int
