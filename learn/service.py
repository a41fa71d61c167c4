"""File-backed lookup for learning topics."""

from pathlib import Path
from typing import Optional
import re
import structlog

from config import get_settings
from learn.models import Topic, TopicContent

logger = structlog.get_logger()

SLUG_PATTERN = re.compile(r"[a-z0-9][a-z0-9-]*")

# Curated topics, in display order
CATALOG: list[Topic] = [
    Topic(slug="equipment", title="Equipment Overview", level="Beginner"),
    Topic(slug="buoyancy", title="Buoyancy Control", level="Beginner"),
    Topic(slug="navigation", title="Underwater Navigation", level="Intermediate"),
]


class LearnService:
    """Serves markdown topics stored in a content directory."""

    def __init__(self, content_dir: Path, catalog: Optional[list[Topic]] = None):
        self.content_dir = Path(content_dir)
        self.catalog = {t.slug: t for t in (CATALOG if catalog is None else catalog)}

    def _path_for(self, slug: str) -> Optional[Path]:
        if not SLUG_PATTERN.fullmatch(slug):
            return None
        return self.content_dir / f"{slug}.md"

    def _topic_for(self, slug: str) -> Topic:
        if slug in self.catalog:
            return self.catalog[slug]
        return Topic(slug=slug, title=slug.replace("-", " ").title())

    def list_topics(self) -> list[Topic]:
        """Catalog topics with content first, then any uncatalogued files."""
        if not self.content_dir.is_dir():
            logger.warning("content_dir_missing", content_dir=str(self.content_dir))
            return []

        available = {
            p.stem for p in self.content_dir.glob("*.md")
            if SLUG_PATTERN.fullmatch(p.stem)
        }
        topics = [t for slug, t in self.catalog.items() if slug in available]
        extras = sorted(available - self.catalog.keys())
        topics.extend(self._topic_for(slug) for slug in extras)
        return topics

    def get_topic(self, slug: str) -> Optional[TopicContent]:
        """Get a topic with its markdown, or None if the slug is unknown."""
        path = self._path_for(slug)
        if path is None or not path.is_file():
            return None

        markdown = path.read_text(encoding="utf-8")
        topic = self._topic_for(slug)
        return TopicContent(**topic.model_dump(), markdown=markdown)


# Dependency injection helper
def get_learn_service() -> LearnService:
    """FastAPI dependency for LearnService."""
    return LearnService(get_settings().content_dir)
