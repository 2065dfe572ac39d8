# /campus_admin/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    auth_router,
    students_router,
    courses_router,
    enrollments_router,
    academics_router,
    fees_router,
    parents_router,
)

# --- Startup Dependencies ---
from .core.logging_config import setup_logging
from .db.base import Base
from .db.database import engine

API_PREFIX = "/api/v1"


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once when the application starts up.
    setup_logging()
    Base.metadata.create_all(bind=engine)
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Campus Admin API",
    description="Student, course, enrollment, fee and family records for the campus admin portals.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix=f"{API_PREFIX}/auth", tags=["Auth"])
app.include_router(students_router.router, prefix=f"{API_PREFIX}/students", tags=["Students"])
app.include_router(courses_router.router, prefix=f"{API_PREFIX}/courses", tags=["Courses"])
app.include_router(enrollments_router.router, prefix=f"{API_PREFIX}/enrollments", tags=["Enrollments"])
app.include_router(academics_router.router, prefix=f"{API_PREFIX}/academics", tags=["Academics"])
app.include_router(fees_router.router, prefix=f"{API_PREFIX}/fees", tags=["Fees"])
app.include_router(parents_router.router, prefix=f"{API_PREFIX}/parents", tags=["Parents"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Campus Admin backend is running!", "version": app.version}
