import logging

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings

from person.router import person_router
from organization.router import organization_router
from maap.router import maap_router
from search.router import search_router
import models_bootstrap 

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

openapi_tags = [
    {
        "name": "MAAP",
        "description": "Review proposed employment changes",
    },
    {
        "name": "Search",
        "description": "Organization directory search",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(openapi_tags=openapi_tags)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(person_router, prefix="/api")
app.include_router(organization_router, prefix="/api")
app.include_router(maap_router, prefix="/api")
app.include_router(search_router, prefix="/api")


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
