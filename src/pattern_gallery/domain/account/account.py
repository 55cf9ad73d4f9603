"""Account value record."""
from pydantic import BaseModel, ConfigDict, Field


class Account(BaseModel):
    """A bank account as produced by ``AccountBuilder``."""
    model_config = ConfigDict(frozen=True)

    account_number: str = Field(..., description="Account identifier")
    interest_rate: float = Field(0.0, description="Annual interest rate")
    opening_branch: str = Field("", description="Branch the account was opened at")
    opening_balance: float = Field(0.0, description="Initial deposit")
    owner_name: str = Field("", description="Account holder")

    def __str__(self) -> str:
        return (
            f"Account Owner -> {self.owner_name}\n"
            f" Opening balance -> {self.opening_balance:.2f}"
        )
