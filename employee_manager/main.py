# employee_manager/main.py
import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from employee_manager.core.config import get_settings, Settings
from employee_manager.core.logging import configure_logging
from employee_manager.routers import rpc, system
from employee_manager.service import EmployeeService
from employee_manager.store import EmployeeStore

logger = logging.getLogger(__name__)

tags_metadata = [
    {"name": "System", "description": "Service health and metadata."},
    {"name": "RPC", "description": "Employee procedures (getAll, getById, create, update, delete, search)."},
]

def create_app(settings: Optional[Settings] = None, store: Optional[EmployeeStore] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        openapi_tags=tags_metadata,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if store is None:
        store = EmployeeStore.from_url(settings.sqlalchemy_url)
    app.state.employee_service = EmployeeService(store)

    # Redirect "/" -> "/docs"
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")
    app.include_router(system.router)
    app.include_router(rpc.router, prefix=settings.RPC_PREFIX)
    for r in app.routes:
        if isinstance(r, APIRoute):
            logger.debug("route %s %s", r.path, sorted(r.methods))
    return app

def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    logger.info("Server running on http://localhost:%s", settings.PORT)
    logger.info("RPC endpoint: http://localhost:%s%s", settings.PORT, settings.RPC_PREFIX)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
