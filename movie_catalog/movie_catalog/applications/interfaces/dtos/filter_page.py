from typing import Optional

from pydantic import BaseModel, Field


class MovieFilter(BaseModel):
    genre: Optional[str] = Field(default=None, description="Genre tag to filter by")
    year_from: Optional[int] = Field(default=None, description="Lower bound of the release year, inclusive")
    year_to: Optional[int] = Field(default=None, description="Upper bound of the release year, inclusive")


class YearRange(BaseModel):
    year_from: int = Field(description="Lower bound of the release year, inclusive")
    year_to: int = Field(description="Upper bound of the release year, inclusive")
