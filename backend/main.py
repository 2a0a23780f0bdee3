import logging
import os
import time

import sentry_sdk
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

import config
from api.routes import router
from engine.pipeline import load_latest_report
from logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

# Initialize Sentry if DSN is configured
if config.SENTRY_DSN:
    sentry_sdk.init(
        dsn=config.SENTRY_DSN,
        traces_sample_rate=0.1,
        environment=config.ENVIRONMENT,
    )

app = FastAPI(
    title="Solana Narrative Detector",
    description="Rule-based narrative detection and build ideas for the Solana ecosystem",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round(time.time() - start, 3)
    logger.info("request | %s %s | %s | %.3fs", request.method, request.url.path, response.status_code, duration)
    return response


app.include_router(router, prefix="/api")


@app.get("/health")
async def health():
    report = load_latest_report(config.DATA_DIR)
    return {
        "status": "ok",
        "service": "solana-narrative-detector",
        "has_report": report is not None,
        "last_run": report.get("timestamp") if report else None,
        "data_dir": os.path.abspath(config.DATA_DIR),
    }
