from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class DocumentSnapshot(ABC):
    """Read-only view of a rendered document

    Exposes only the queries the signal analyzer needs. Implementations
    return empty values for anything missing instead of raising.
    """

    @property
    @abstractmethod
    def hostname(self) -> str:
        """Host of the page the document was rendered for"""
        pass

    @abstractmethod
    def title(self) -> str:
        pass

    @abstractmethod
    def meta_content(self, name: str) -> Optional[str]:
        """``content`` of ``<meta name=...>``, None when the tag is absent"""
        pass

    @abstractmethod
    def link_href(self, rel: str) -> Optional[str]:
        """``href`` of the first ``<link rel=...>``, None when absent"""
        pass

    @abstractmethod
    def elements(self, tag: str) -> List[Dict[str, str]]:
        """Attributes of every element with the given tag name"""
        pass

    @abstractmethod
    def text_content(self) -> str:
        """Visible body text"""
        pass

    @abstractmethod
    def script_blocks(self, script_type: str) -> List[str]:
        """Bodies of ``<script type=...>`` elements"""
        pass
