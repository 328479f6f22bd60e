from typing import Dict, List, Optional
from urllib.parse import urlparse
from bs4 import BeautifulSoup, Comment
from .document import DocumentSnapshot

INVISIBLE_TAGS = ('script', 'style', 'noscript', 'template')


class SoupDocument(DocumentSnapshot):
    """Document snapshot parsed from HTML with BeautifulSoup"""

    def __init__(self, html: str, url: str):
        self.url = url
        self._hostname = urlparse(url).hostname or ''
        self.soup = BeautifulSoup(html or '', 'html.parser')

    @property
    def hostname(self) -> str:
        return self._hostname

    def title(self) -> str:
        if self.soup.title and self.soup.title.string:
            return self.soup.title.string.strip()
        return ''

    def meta_content(self, name: str) -> Optional[str]:
        meta = self.soup.find('meta', attrs={'name': name})
        if meta is None:
            return None
        return meta.get('content') or None

    def link_href(self, rel: str) -> Optional[str]:
        # bs4 treats rel as a multi-valued attribute
        for link in self.soup.find_all('link', href=True):
            if rel in (link.get('rel') or []):
                return link['href']
        return None

    def elements(self, tag: str) -> List[Dict[str, str]]:
        return [
            {k: v if isinstance(v, str) else ' '.join(v) for k, v in element.attrs.items()}
            for element in self.soup.find_all(tag)
        ]

    def text_content(self) -> str:
        body = self.soup.body or self.soup
        parts = []
        for text in body.find_all(string=True):
            if isinstance(text, Comment):
                continue
            if text.parent is not None and text.parent.name in INVISIBLE_TAGS:
                continue
            parts.append(str(text))
        return ' '.join(parts)

    def script_blocks(self, script_type: str) -> List[str]:
        return [
            script.string or script.get_text()
            for script in self.soup.find_all('script', attrs={'type': script_type})
        ]
