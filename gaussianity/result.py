"""Test result record."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class TestResult:
    """Outcome of a Gaussianity test."""

    __test__ = False  # not a pytest class

    statistic: float
    df: int
    p_value: float
    alternative: str
    method: str
    data_name: str

    # Advisory messages (non-stationarity); never fatal
    warnings: Tuple[str, ...] = ()

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            "",
            f"\t{self.method}",
            "",
            f"data:  {self.data_name}",
            f"lobato = {self.statistic:.4g}, df = {self.df}, p-value = {self.p_value:.4g}",
            f"alternative hypothesis: {self.alternative}",
            "",
        ]

        if self.warnings:
            lines.append("WARNINGS:")
            for w in self.warnings:
                lines.append(f"  - {w}")
            lines.append("")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to serializable dict."""
        d = asdict(self)
        d['warnings'] = list(self.warnings)
        return d
