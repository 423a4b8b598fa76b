from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from dotenv import load_dotenv

from db import Base, engine
import suitability.models  # noqa: F401  registers tables on Base.metadata
from suitability.logic.constants import ENGINE_VERSION
from suitability.routes import router as suitability_router

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)
logger.info(f"Suitability API starting (engine {ENGINE_VERSION}, log level {LOG_LEVEL})")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app = FastAPI(title="UniConnect Suitability API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(suitability_router)


@app.get("/", tags=["meta"])
def root():
    return {"service": "suitability", "status": "ok"}
