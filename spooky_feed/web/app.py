"""HTTP surface for the site build: RSS passthrough and episode JSON."""

from datetime import datetime
from typing import Optional

from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse, Response
import structlog

from ..config.settings import Settings, settings
from ..ingestion.interfaces import FetcherInterface
from ..pipeline.aggregator import FeedAggregator
from ..pipeline import queries
from .rss_endpoint import generate_rss_response

logger = structlog.get_logger()

app = FastAPI(title="Spooky Bitch Show Feed")


def get_settings() -> Settings:
    return settings


def get_fetcher() -> Optional[FetcherInterface]:
    """None lets the pipeline open its own HTTP session."""
    return None


def get_aggregator(
    config: Settings = Depends(get_settings),
    fetcher: Optional[FetcherInterface] = Depends(get_fetcher),
) -> FeedAggregator:
    return FeedAggregator(config=config, fetcher=fetcher)


def _not_found(kind: str, value: str) -> JSONResponse:
    logger.info("lookup_not_found", kind=kind, value=value)
    return JSONResponse(status_code=404, content={"error": f"{kind} not found", "value": value})


@app.get("/health")
async def health_check():
    """Health check endpoint for load balancers."""
    return {"status": "healthy", "timestamp": datetime.utcnow().isoformat()}


@app.get("/rss.xml")
async def rss_feed(
    config: Settings = Depends(get_settings),
    fetcher: Optional[FetcherInterface] = Depends(get_fetcher),
    aggregator: FeedAggregator = Depends(get_aggregator),
):
    """Upstream feed with item links rewritten to our episode pages."""
    result = await generate_rss_response(config=config, fetcher=fetcher, aggregator=aggregator)
    return Response(content=result.body, status_code=result.status, headers=result.headers)


@app.get("/api/feed")
async def feed(aggregator: FeedAggregator = Depends(get_aggregator)):
    podcast = await queries.fetch_podcast_feed(aggregator)
    return podcast.to_dict()


@app.get("/api/episodes")
async def episodes(
    category: Optional[str] = None,
    aggregator: FeedAggregator = Depends(get_aggregator),
):
    if category:
        found = await queries.get_episodes_by_category(category, aggregator)
    else:
        found = await queries.get_all_episodes(aggregator)
    return [episode.to_dict() for episode in found]


@app.get("/api/episodes/latest")
async def latest_episodes(
    count: int = Query(2, ge=0),
    aggregator: FeedAggregator = Depends(get_aggregator),
):
    found = await queries.get_latest_episodes(count, aggregator)
    return [episode.to_dict() for episode in found]


@app.get("/api/episodes/slug/{slug}")
async def episode_by_slug(slug: str, aggregator: FeedAggregator = Depends(get_aggregator)):
    episode = await queries.get_episode_by_slug(slug, aggregator)
    if episode is None:
        return _not_found("episode", slug)
    return episode.to_dict()


@app.get("/api/episodes/{episode_id}")
async def episode_by_id(episode_id: str, aggregator: FeedAggregator = Depends(get_aggregator)):
    episode = await queries.get_episode_by_id(episode_id, aggregator)
    if episode is None:
        return _not_found("episode", episode_id)
    return episode.to_dict()
