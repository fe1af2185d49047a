"""Summary of a verification run."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from commitprobe.core.result import CheckResult

RULE_WIDTH = 50
SUCCESS_BANNER = (
    "🎉 All checks passed! Auto Commit tool is configured correctly."
)
FAILURE_BANNER = "⚠️ Some checks failed, please review the configuration."


def success_rate(passed: int, total: int) -> str:
    """Percentage to one decimal place, halves rounded up.

    >>> success_rate(8, 10)
    '80.0'
    >>> success_rate(1, 8)
    '12.5'
    """
    if total == 0:
        return "0.0"
    rate = Decimal(passed * 100) / Decimal(total)
    return str(rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class Report:
    """Read-only view over the results of one run."""

    def __init__(self, results: list[CheckResult]):
        self.results = list(results)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def success_rate(self) -> str:
        return success_rate(self.passed, self.total)

    @property
    def all_passed(self) -> bool:
        return self.total > 0 and self.passed == self.total

    def render(self) -> str:
        lines = ["📊 Results summary:", "=" * RULE_WIDTH]
        lines.extend(f"  {result}" for result in self.results)
        lines.extend([
            "-" * RULE_WIDTH,
            f"Total checks: {self.total}",
            f"Passed: {self.passed}",
            f"Failed: {self.failed}",
            f"Success rate: {self.success_rate}%",
            "",
            SUCCESS_BANNER if self.all_passed else FAILURE_BANNER,
        ])
        return "\n".join(lines)
