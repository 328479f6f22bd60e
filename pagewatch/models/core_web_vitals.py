from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class CoreWebVitalsSample:
    """One measurement of the page-experience metrics (ms, cls is a ratio)"""
    lcp: float = 0.0
    fid: float = 0.0
    cls: float = 0.0
    fcp: float = 0.0
    ttfb: float = 0.0

    @classmethod
    def zero(cls) -> 'CoreWebVitalsSample':
        return cls()

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
