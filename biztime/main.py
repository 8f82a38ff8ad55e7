from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime.core.config import settings
from biztime.core.db import run_migrations
from biztime.core.errors import register_error_handlers
from biztime.core.logging import configure_logging

# Routers
from biztime.routes import companies, industries, invoices

logger = logging.getLogger(__name__)

app = FastAPI(
    title="BizTime API",
    version="1.0.0",
)

# ==========================
# CORS
# ==========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==========================
# Startup Event
# ==========================
@app.on_event("startup")
def startup_event():
    configure_logging(settings.LOG_LEVEL, sql_echo=settings.SQL_ECHO)
    run_migrations()
    logger.info("✓ Database initialized")
    logger.info("✓ BizTime API is running")

# ==========================
# Routers
# ==========================
app.include_router(companies.router, prefix="/companies", tags=["companies"])
app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
app.include_router(industries.router, prefix="/industries", tags=["industries"])

# ==========================
# Error handling
# ==========================
register_error_handlers(app)
