"""FastAPI application setup."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from diligence.config import settings
from .routes import router

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    description="Generate tailored technical due diligence scripts for M&A transactions",
    version=settings.api_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.api_version}


# Include API routes
app.include_router(router, prefix="/api")
