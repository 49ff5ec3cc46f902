from fastapi import Depends, Request
from sqlalchemy.orm import Session

from trackstar.database import get_db
from trackstar.services.stats_service import HabitStatsService


def get_stats_service(request: Request, db: Session = Depends(get_db)) -> HabitStatsService:
    """FastAPI dependency — a stats engine bound to the store create_app() was given."""
    store = request.app.state.store_factory(db)
    return HabitStatsService(store)
