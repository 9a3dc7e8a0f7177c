import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from config.database import Base, engine
from config.settings import AVATAR_DIRECTORY, AVATAR_URL_PATH, CORS_ORIGINS, LOG_LEVEL

# Auth routes
from app.api.endpoints.auth_credentials import router as auth_cred_routes

from app.routes.baby_routes import router as baby_routes
from app.routes.growth_routes import router as growth_routes
from app.routes.milestone_routes import router as milestone_routes
from app.routes.journal_routes import router as journal_routes
from app.routes.vaccination_routes import router as vaccination_routes
from app.routes.dashboard_routes import router as dashboard_routes
from app.routes.preferences_routes import router as preferences_routes


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Creates any missing tables; every model is imported through the routers above
    Base.metadata.create_all(bind=engine)
    logger.info("Kidavu API started")
    yield


# FastAPI instance
app = FastAPI(
    title="Kidavu API",
    version="0.1.0",
    description="Backend for tracking a baby's growth, milestones, vaccinations and journal",
    lifespan=lifespan,
)

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database operation failed on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Database operation failed."})


# Uploaded avatars
os.makedirs(AVATAR_DIRECTORY, exist_ok=True)
app.mount(AVATAR_URL_PATH, StaticFiles(directory=AVATAR_DIRECTORY), name="avatars")

# Main router with the /api prefix
routerAPI = APIRouter(prefix="/api")

routerAPI.include_router(auth_cred_routes)
routerAPI.include_router(baby_routes)
routerAPI.include_router(growth_routes)
routerAPI.include_router(milestone_routes)
routerAPI.include_router(journal_routes)
routerAPI.include_router(vaccination_routes)
routerAPI.include_router(dashboard_routes)
routerAPI.include_router(preferences_routes)
# Attach the router to the application
app.include_router(routerAPI)



@app.get("/", tags=["Root"])
async def read_root():
    return {"status": "Kidavu API is up!"}
