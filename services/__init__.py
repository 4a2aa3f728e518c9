"""
Services module - Business Logic Layer.

Contains application services that orchestrate business logic,
sitting between the API layer (routes) and the data layer (store).

Services handle:
- Business rule validation
- Orchestrating multiple store operations
- Coordinating with external services (LLM)
- Pushing progress to WebSocket subscribers

Usage:
    from services import SwotAnalysisService

    service = SwotAnalysisService(store, llm_service, notifier)
    analysis = await service.start_analysis(question_id)
"""

from services.notifier import ConnectionNotifier
from services.swot_analysis_service import SwotAnalysisService
from services.career_data_service import CareerDataService
from services.recommendation_service import RecommendationService

__all__ = [
    "ConnectionNotifier",
    "SwotAnalysisService",
    "CareerDataService",
    "RecommendationService",
]
