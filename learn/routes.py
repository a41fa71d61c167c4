"""Learning content API routes."""

from fastapi import APIRouter, Depends, HTTPException
import structlog

from learn.models import Topic, TopicContent
from learn.service import LearnService, get_learn_service

logger = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=list[Topic])
async def list_topics(
    service: LearnService = Depends(get_learn_service)
):
    """List available learning topics."""
    topics = service.list_topics()
    logger.info("topics_listed", count=len(topics))
    return topics


@router.get("/{topic}", response_model=TopicContent)
async def get_topic(
    topic: str,
    service: LearnService = Depends(get_learn_service)
):
    """Get the markdown source for a learning topic."""
    content = service.get_topic(topic)
    if content is None:
        logger.info("topic_not_found", topic=topic)
        raise HTTPException(status_code=404, detail=f"Topic not found: {topic}")
    logger.info("topic_retrieved", topic=topic)
    return content
