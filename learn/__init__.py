"""Open Water learning content feature."""

from .models import Topic, TopicContent
from .service import LearnService, get_learn_service
from .routes import router

__all__ = ["Topic", "TopicContent", "LearnService", "get_learn_service", "router"]
