"""
Output data models for the classification endpoint.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassificationResult(BaseModel):
    """
    Structured extraction returned by POST /classify.

    All four keys are required and always serialized; a field the model
    could not find is null, never omitted. Extra keys are rejected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    zip: Optional[str] = Field(
        ...,
        description="Postal code (ZIP code), if found in the text",
        examples=["90210"],
    )
    brand: Optional[str] = Field(
        ...,
        description="Brand or company name, if mentioned",
        examples=["Domino's"],
    )
    category: Optional[str] = Field(
        ...,
        description="Product or service category (e.g., food, electronics, clothing)",
        examples=["food"],
    )
    time_pref: Optional[str] = Field(
        ...,
        description="Time preferences (e.g., today, tomorrow, evening, morning)",
        examples=["tomorrow evening"],
    )
