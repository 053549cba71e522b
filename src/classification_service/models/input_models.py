"""
Input data models for the classification endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class ClassificationRequest(BaseModel):
    """
    A single classification request.

    Built from the inbound JSON body by
    `validation.request.parse_classification_request`, which enforces the
    exact error messages returned to clients. Never persisted.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        min_length=1,
        description="Free text to extract fields from",
        examples=["Order Domino's pizza to 90210 tomorrow evening"],
    )
