"""
Page Signal Analyzer - Extracts on-page SEO signals from a document snapshot
"""

import json
import logging
from typing import Dict, List
from urllib.parse import urlparse
from ..config import DEFAULT_KEYWORDS
from ..models import SEOSnapshotMetrics
from .document import DocumentSnapshot

logger = logging.getLogger(__name__)

INTERNAL_PREFIXES = ('/', './', '../')
STRUCTURED_DATA_TYPE = 'application/ld+json'


class PageSignalAnalyzer:
    """Reads SEO signals (headings, images, links, keywords...) from a document"""

    def __init__(self, keywords: List[str] = None):
        self.keywords = list(keywords) if keywords is not None else list(DEFAULT_KEYWORDS)

    def analyze(self, document: DocumentSnapshot) -> SEOSnapshotMetrics:
        """Analyze the document; missing elements yield empty, zero or None values"""
        images = document.elements('img')
        anchors = [a.get('href') or '' for a in document.elements('a')]
        text = document.text_content()
        words = text.split()

        return SEOSnapshotMetrics(
            page_title=document.title() or '',
            meta_description=document.meta_content('description') or '',
            h1_count=len(document.elements('h1')),
            h2_count=len(document.elements('h2')),
            image_count=len(images),
            images_with_alt=sum(1 for img in images if (img.get('alt') or '').strip()),
            internal_links=sum(1 for href in anchors if href.startswith(INTERNAL_PREFIXES)),
            external_links=sum(1 for href in anchors if self._is_external(href, document.hostname)),
            word_count=len(words),
            keyword_density=self.keyword_density(words),
            structured_data_present=self._has_structured_data(document),
            canonical_url=document.link_href('canonical'),
            meta_robots=document.meta_content('robots')
        )

    def keyword_density(self, words: List[str]) -> Dict[str, float]:
        """Percentage of tokens containing each tracked keyword

        Substring matching, so inflected forms count too.
        """
        total_words = len(words)
        lowered = [word.lower() for word in words]
        density = {}

        for keyword in self.keywords:
            needle = keyword.lower()
            count = sum(1 for word in lowered if needle in word)
            density[keyword] = (count / total_words) * 100 if total_words > 0 else 0.0

        return density

    @staticmethod
    def _is_external(href: str, hostname: str) -> bool:
        if not href.lower().startswith(('http://', 'https://')):
            return False
        try:
            target_host = urlparse(href).hostname or ''
        except ValueError:
            return False
        return target_host.lower() != hostname.lower()

    @staticmethod
    def _has_structured_data(document: DocumentSnapshot) -> bool:
        for block in document.script_blocks(STRUCTURED_DATA_TYPE):
            try:
                json.loads(block)
                return True
            except (TypeError, ValueError):
                logger.debug("Skipping unparseable structured data block")
        return False
