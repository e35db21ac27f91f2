"""
Hackathon sync server (FastAPI)
===============================
Exposes the sync trigger and the active listings read by the client app.
"""
import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse, Response
import uvicorn

from backend.config import load_config
from backend.crud import get_active_hackathons
from backend.db import get_session_factory
from backend.schemas import HackathonOut, Mode, Source
from sync_hackathons import run_sync

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

TRIGGER_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]

app = FastAPI(
    title="Hackathon Sync API",
    description="Aggregates hackathons from external platforms into one table",
    version="1.0.0"
)


@lru_cache(maxsize=1)
def get_config():
    return load_config()


@app.options("/sync-hackathons")
def sync_preflight():
    """
    Answers every OPTIONS request with an empty 204 and the CORS headers.
    CORSMiddleware is not used here because it only handles pre-flights that
    carry Origin and Access-Control-Request-Method, and replies 200 with a body.
    """
    return Response(status_code=204, headers=CORS_HEADERS)


@app.api_route("/sync-hackathons", methods=TRIGGER_METHODS)
def trigger_sync():
    """Runs one sync. Any method other than OPTIONS triggers it."""
    try:
        result = run_sync(get_config())
        return JSONResponse(result, headers=CORS_HEADERS)
    except Exception as e:
        logger.exception(f"Sync error: {e}")
        return JSONResponse(
            {"success": False, "error": str(e)},
            status_code=500,
            headers=CORS_HEADERS,
        )


@app.get("/hackathons", response_model=List[HackathonOut])
def list_hackathons(
    response: Response,
    source: Optional[List[Source]] = Query(None),
    mode: Optional[Mode] = None,
    q: Optional[str] = None,
    limit: int = Query(50, ge=1, le=200),
):
    response.headers.update(CORS_HEADERS)
    session_factory = get_session_factory(get_config())
    db = session_factory()
    try:
        rows = get_active_hackathons(
            db,
            sources=[s.value for s in source] if source else None,
            mode=mode.value if mode else None,
            keyword=q,
            limit=limit,
        )
        return [HackathonOut.model_validate(row) for row in rows]
    finally:
        db.close()


if __name__ == "__main__":
    config = get_config()
    logging.basicConfig(level=config.log_level, format='%(asctime)s %(levelname)s %(message)s')
    uvicorn.run(app, host="0.0.0.0", port=8000)
