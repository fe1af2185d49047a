"""Result types for check execution."""

from pydantic import BaseModel, ConfigDict


class CheckResult(BaseModel):
    """Outcome of a single named check."""

    model_config = ConfigDict(frozen=True)

    name: str
    passed: bool
    message: str

    @property
    def symbol(self) -> str:
        return "✅" if self.passed else "❌"

    def __str__(self) -> str:
        return f"{self.symbol} {self.name}: {self.message}"
