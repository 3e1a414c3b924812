# -*- coding: utf-8 -*-
"""
BetterNames Load Report Module

Per-source results of one load cycle and the aggregated, human-readable
summary shown to the operator.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from betternames_logger import get_logger
from locales import tr

logger = get_logger("models.load_report")


@dataclass
class SourceLoadResult:
    """Outcome of one source file."""
    file_name: str
    file_path: Optional[str] = None
    entry_count: int = 0
    overridden: int = 0             # keys that replaced an earlier source's value
    encoding: Optional[str] = None  # EncodingDecision value
    error: Optional[str] = None     # diagnostic line, None on success

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LoadReport:
    """Complete report of one load cycle."""
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat(timespec='seconds'))
    translation_dir: Optional[str] = None
    preset: Optional[str] = None
    results: List[SourceLoadResult] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)
    total_entries: int = 0

    def add_result(self, result: SourceLoadResult):
        self.results.append(result)
        if result.error:
            self.diagnostics.append(result.error)
        else:
            self.total_entries += result.entry_count

    def add_diagnostic(self, message: str):
        """Record a failure that is not tied to one source file."""
        self.diagnostics.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics)

    @property
    def failed_count(self) -> int:
        return len(self.diagnostics)

    def failed_results(self) -> List[SourceLoadResult]:
        return [r for r in self.results if not r.ok]

    def summary(self) -> str:
        """
        Aggregated message for the operator.

        Empty string when nothing failed.
        """
        if not self.diagnostics:
            return ""
        lines = [tr("report_header", app=tr("app_name"), count=self.failed_count)]
        lines.extend(self.diagnostics)
        lines.append("")
        lines.append(tr("report_advice"))
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
