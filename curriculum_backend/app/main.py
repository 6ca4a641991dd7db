from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router as api_router
from app.core.curriculum import get_curriculum
from app.core.logging import configure_logging

app = FastAPI(title="Curriculum Planner API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.on_event("startup")
def on_startup():
    configure_logging()
    # Fail fast on a broken dataset instead of on the first request
    get_curriculum()


@app.get("/health")
def health_check():
    return {"status": "ok"}
