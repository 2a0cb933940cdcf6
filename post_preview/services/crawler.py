from collections.abc import Iterable
from typing import Optional


class CrawlerClassifier:
    """Recognise link-preview crawlers by user-agent substrings."""

    def __init__(self, signatures: Iterable[str]) -> None:
        self._signatures: tuple[str, ...] = tuple(
            signature.lower() for signature in signatures if signature
        )

    @property
    def signatures(self) -> tuple[str, ...]:
        return self._signatures

    def is_crawler(self, user_agent: Optional[str]) -> bool:
        agent = (user_agent or "").lower()
        if not agent:
            return False
        return any(signature in agent for signature in self._signatures)
