import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.config import settings
from src.database import init_db
from src.exceptions import register_exception_handlers
from src.logging_config import setup_logging
from src.auth import router as auth_router
from src.routes import router as routes_router
from src.stops import router as stops_router
from src.journeys import router as journeys_router
from src.tickets import router as tickets_router
from src.chat import router as chat_router

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s started (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)
    yield

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Urban transit planning, ticketing and assistant API",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(
    auth_router.router,
    prefix=f"{settings.API_V1_STR}/auth",
    tags=["Authentication"]
)

app.include_router(
    routes_router,
    prefix=f"{settings.API_V1_STR}/routes",
    tags=["Route Planning"]
)

app.include_router(
    stops_router.router,
    prefix=f"{settings.API_V1_STR}/stops",
    tags=["Stops"]
)

app.include_router(
    journeys_router.router,
    prefix=f"{settings.API_V1_STR}/journeys",
    tags=["Journeys"]
)

app.include_router(
    tickets_router,
    prefix=f"{settings.API_V1_STR}/tickets",
    tags=["Tickets"]
)

app.include_router(
    chat_router,
    prefix=f"{settings.API_V1_STR}/chat",
    tags=["AI Assistant"]
)

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "UrbanPilot Transit API",
        "version": "1.0.0",
        "docs": "/docs"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
