# healthscribe/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthscribe.config import get_settings
from healthscribe.logging_config import setup_logging
from healthscribe.api.routes import router as api_router
from healthscribe.services import get_analysis_service


settings = get_settings()

app = FastAPI(title="HealthScribe API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.on_event("startup")
def on_startup() -> None:
    setup_logging(settings.log_level)
    # provider client is built once per process
    get_analysis_service()


@app.get("/")
def root():
    return {"message": "HealthScribe API is running"}


app.include_router(api_router, prefix="/api")
