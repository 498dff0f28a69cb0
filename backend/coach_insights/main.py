import logging
from typing import Dict

from fastapi import Depends, FastAPI

from .config import Settings, get_settings
from .insight_routes import router as insight_router
from .logging_config import configure_logging
from .scales import CANONICAL_SCALE


configure_logging()
logger = logging.getLogger(__name__)

settings_snapshot = get_settings()
app = FastAPI(title=settings_snapshot.api_title, version="0.1.0")
app.include_router(insight_router)

logger.info(
    "Insights API starting (min_sessions=%d, input_score_scale=%s)",
    settings_snapshot.min_sessions,
    settings_snapshot.input_score_scale.value,
)


@app.get("/healthz")
def health(settings: Settings = Depends(get_settings)) -> Dict[str, str]:
    return {
        "status": "ok",
        "score_scale": CANONICAL_SCALE.value,
        "input_score_scale": settings.input_score_scale.value,
    }
