"""
FastAPI Main Application for the XbeeWeb API
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from Database import Database
from auth.cookies import CookieCipher
from config import get_config_section
from api.routers import auth, nodes
from api.auth_context import set_auth_context
from api.auth_middleware import AuthForward, auth_forward_handler
from api.dependencies import get_config_path, set_database_instance, get_database
from repositories.reading_repository import ReadingRepository
from repositories.xbee_repository import XbeeRepository
from services.info_set import InfoSet

logger = logging.getLogger("uvicorn.error")

# Initialize FastAPI app
app = FastAPI(
    title="XbeeWeb API",
    description="REST API for the Xbee sensor network",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(AuthForward, auth_forward_handler)

# Include routers
app.include_router(auth.router, prefix="/api")
app.include_router(nodes.router, prefix="/api")


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "XbeeWeb API",
        "version": "1.0.0"
    }


def load_info_set(db: Database) -> InfoSet:
    """Seeds the node cache from the xbees and readings tables."""
    info_set = InfoSet()
    with db.connection() as conn:
        cursor = conn.cursor(buffered=True)
        try:
            xbees = XbeeRepository(cursor).list_all()
            readings = ReadingRepository(cursor).latest_per_node()
        finally:
            cursor.close()
    count = info_set.load(xbees, readings)
    logger.info("Node cache loaded with %s node(s)", count)
    return info_set


@app.on_event("startup")
async def startup_event():
    """Initialize database pool, node cache and cookie cipher on startup"""
    db_config = get_config_section('database', get_config_path())
    auth_config = get_config_section('auth', get_config_path())

    db = Database(
        host=db_config.get('host', 'localhost'),
        user=db_config.get('user', ''),
        password=db_config.get('password', ''),
        database_name=db_config.get('name', 'xbee'),
        port=db_config.get('port', 3306),
        pool_size=db_config.get('pool_size', 5)
    )
    
    if not db.connect():
        raise RuntimeError("Failed to connect to database")
    
    set_database_instance(db)
    app.state.info_set = load_info_set(db)
    set_auth_context(
        app,
        cookie_cipher=CookieCipher(auth_config.get('cookie_key')),
        cookie_secure=bool(auth_config.get('cookie_secure', False)),
    )
    logger.info("Database connected successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Close database pool on shutdown"""
    try:
        db = get_database()
    except HTTPException:
        return
    if db.is_connected():
        db.close()
    set_database_instance(None)
