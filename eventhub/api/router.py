"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from eventhub.api.routes import events, tickets
from eventhub.core.config import get_settings

api_router = APIRouter(prefix=get_settings().API_PREFIX)
api_router.include_router(events.router)
api_router.include_router(tickets.router)
