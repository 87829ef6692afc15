import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .config import CORS_ORIGINS
from .database import create_tables
from .dependencies import password_hasher
from .exception_handlers import setup_exception_handlers
from .logging_config import configure_logging
from .routers import auth, tasks
from .security.middleware import authentication_middleware

configure_logging()

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Task List API",
    description="Personal task tracking API with bearer-token authentication",
    version="1.0.0"
)

# Runs inside CORS so preflight requests are answered before the policy
app.middleware("http")(authentication_middleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(tasks.router, prefix="/api", tags=["tasks"])

def check_secret_key():
    if config.SECRET_KEY == config.DEFAULT_SECRET_KEY:
        logger.warning(
            "SECRET_KEY is not set; using the built-in placeholder. "
            "Anyone can forge bearer tokens until it is configured."
        )

# Create tables on startup
@app.on_event("startup")
def on_startup():
    check_secret_key()
    create_tables()
    # Unknown-user logins compare against this hash; build it before the first request
    password_hasher.dummy_hash
    logger.info("Task List API started")

@app.get("/health")
def health_check():
    return {"status": "healthy"}
