"""
Issue model representing a single field-scoped validation failure.
"""

from pydantic import BaseModel, Field


class Issue(BaseModel):
    """
    One validation failure, addressed by field rather than by position.

    Attributes:
        field: Field the failure is attached to (the dependent field for
            conditional rules, never the discriminator)
        message: Human-readable message shown next to the field
    """

    field: str = Field(..., min_length=1)
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

    class Config:
        frozen = True
