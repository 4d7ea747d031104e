"""Normalized row data model."""

from pydantic import BaseModel, ConfigDict, Field


class Row(BaseModel):
    """One output row.

    `ordinal` 0 is reserved for the header row built from column labels;
    `cells` maps each effective label to its trimmed value in column order.
    """

    ordinal: int = Field(..., ge=0)
    cells: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def is_header(self) -> bool:
        """Whether this is the synthetic header row."""
        return self.ordinal == 0
