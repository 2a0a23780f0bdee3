import asyncio
import logging

from fastapi import APIRouter, HTTPException

import config
from engine.pipeline import detect_and_generate, load_latest_report

logger = logging.getLogger(__name__)

router = APIRouter()

# One pipeline run at a time
_pipeline_lock = asyncio.Lock()


def _latest_or_404() -> dict:
    report = load_latest_report(config.DATA_DIR)
    if report is None:
        raise HTTPException(status_code=404, detail="No report generated yet. POST /api/run?save=true first.")
    return report


@router.get("/report")
async def get_report():
    """Latest persisted report"""
    return _latest_or_404()


@router.get("/narratives")
async def get_narratives():
    report = _latest_or_404()
    return {"timestamp": report.get("timestamp"), "narratives": report.get("narratives", [])}


@router.get("/ideas")
async def get_ideas():
    report = _latest_or_404()
    return {"timestamp": report.get("timestamp"), "buildIdeas": report.get("buildIdeas", [])}


@router.post("/run")
async def run_report(save: bool = False):
    """Run the pipeline now and return the fresh report"""
    if _pipeline_lock.locked():
        raise HTTPException(status_code=409, detail="Pipeline already running")
    async with _pipeline_lock:
        try:
            report = await detect_and_generate(save=save, data_dir=config.DATA_DIR)
        except Exception as e:
            logger.error("Pipeline error: %s", e, exc_info=True)
            raise HTTPException(status_code=500, detail=str(e))
    return report.to_dict()
