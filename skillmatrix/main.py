from fastapi import FastAPI

from .config import SETTINGS
from .errors import register_exception_handlers
from .logging_config import configure_logging
from .middleware import RequestLoggingMiddleware
from .routers import auth, skills, positions, employees, employee_skills, dashboard

configure_logging(SETTINGS["logging"]["level"])

# Initialize FastAPI application
app = FastAPI(title=SETTINGS["app"]["title"], version=SETTINGS["app"]["version"])

register_exception_handlers(app)
app.add_middleware(RequestLoggingMiddleware)

# Register routers
app.include_router(auth.router)
app.include_router(dashboard.router)
app.include_router(skills.router)
app.include_router(positions.router)
app.include_router(employees.router)
app.include_router(employee_skills.router)

# Health check endpoint
@app.get("/health")
def health():
    return {"status": "ok"}
