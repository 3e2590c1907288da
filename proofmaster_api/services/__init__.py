"""Services package"""

from .query_service import QueryService, get_query_service
from .study_service import StudyService, get_study_service

__all__ = [
    "QueryService",
    "get_query_service",
    "StudyService",
    "get_study_service",
]
