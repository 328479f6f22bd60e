from dataclasses import dataclass, asdict, field
from typing import Dict, Optional, Any


@dataclass(frozen=True)
class SEOSnapshotMetrics:
    """On-page SEO signals read from one document"""
    page_title: str = ""
    meta_description: str = ""
    h1_count: int = 0
    h2_count: int = 0
    image_count: int = 0
    images_with_alt: int = 0
    internal_links: int = 0
    external_links: int = 0
    word_count: int = 0
    keyword_density: Dict[str, float] = field(default_factory=dict)
    structured_data_present: bool = False
    canonical_url: Optional[str] = None
    meta_robots: Optional[str] = None

    @property
    def alt_coverage(self) -> float:
        """Share of images carrying alt text, 1.0 for a page without images"""
        if self.image_count == 0:
            return 1.0
        return self.images_with_alt / self.image_count

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
