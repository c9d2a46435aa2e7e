from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from bloglist import __version__
from bloglist.config import Settings, get_settings
from bloglist.database import build_engine, build_session_factory, create_tables
from bloglist.middleware.errors import register_error_handlers
from bloglist.middleware.request_logging import RequestLoggingMiddleware, configure_logging
from bloglist.routers import blogs, users, login

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="API for sharing blog links between registered users",
        version=__version__,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLoggingMiddleware())
    register_error_handlers(app)

    # Include routers
    app.include_router(blogs.router, prefix=f"{settings.API_PREFIX}/blogs", tags=["blogs"])
    app.include_router(users.router, prefix=f"{settings.API_PREFIX}/users", tags=["users"])
    app.include_router(login.router, prefix=f"{settings.API_PREFIX}/login", tags=["login"])

    @app.on_event("startup")
    async def startup():
        await create_tables(app.state.engine)

    @app.on_event("shutdown")
    async def shutdown():
        await app.state.engine.dispose()

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("bloglist.main:app", host="0.0.0.0", port=app.state.settings.PORT, reload=True)
