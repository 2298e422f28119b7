"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from contextflow import __version__
from contextflow.application.services import EntityExtractor
from contextflow.application.use_cases.ingestion import ContextCollector
from contextflow.config import Settings, get_settings
from contextflow.infrastructure.embedding.openai_provider import OpenAIEmbeddingService
from contextflow.infrastructure.persistence.postgres.connection import create_pool
from contextflow.infrastructure.persistence.postgres.context_store import PostgresContextStore
from contextflow.infrastructure.profile.json_profile import JsonProfileLearner, UserProfile
from contextflow.infrastructure.tagging import create_name_tagger
from contextflow.interfaces.api.app import create_app
from contextflow.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_collector(settings: Settings) -> ContextCollector:
    """Build the single collector instance shared by every producer."""
    config = settings.collector_config()
    store = PostgresContextStore(create_pool(settings.database_url))
    embedding_service = OpenAIEmbeddingService(
        base_url=settings.embedding_api_url,
        api_key=settings.embedding_api_key,
        model=settings.embedding_model,
        timeout=settings.embedding_timeout,
    )
    profile_learner = JsonProfileLearner(
        settings.profile_path,
        default=UserProfile(
            name=settings.user_name,
            system_full_name=settings.user_full_name or None,
        ),
    )
    extractor = EntityExtractor(
        tagger=create_name_tagger(settings.ner_model), confidence=config.confidence
    )
    return ContextCollector(
        store=store,
        embedding_service=embedding_service,
        profile_learner=profile_learner,
        extractor=extractor,
        config=config,
    )


def create_contextflow_app() -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)
    collector = create_collector(settings)
    if not settings.embedding_api_key:
        logger.warning("EMBEDDING_API_KEY not set, chunks will be stored without embeddings")
    return create_app(collector)


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    print(f"ContextFlow v{__version__}")
    uvicorn.run(create_contextflow_app(), host=settings.host, port=settings.port)
