## Main application entry point

from fastapi import FastAPI

from studypath.logging_config import configure_logging
from studypath.routes import router as app_router
from studypath.roadmaps.routes import router as roadmaps_router
from studypath.generation.routes import router as generation_router

configure_logging()

app = FastAPI(title="StudyPath")

app.include_router(app_router)
app.include_router(roadmaps_router)
app.include_router(generation_router)
