#!/usr/bin/env python3
"""
RFP Qualification Engine API
FastAPI application exposing proposal qualification and prompt generation
"""

import sys
import os
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add parent directory to path to import engine modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from api.core.config import get_config
from api.core.logging import get_logger, setup_logging
from api.middleware import RequestContextMiddleware, SecurityHeadersMiddleware
from api.proposal_endpoints import prompt_router, proposal_router
from engines.errors import InvalidInput

setup_logging()
logger = get_logger(__name__)

# Load runtime configuration
settings = get_config()

# Initialize FastAPI app
app = FastAPI(
    title="RFP Qualification Engine API",
    description="Qualification scoring, gap recommendations and proposal prompts for RFP responses",
    version="1.0.0"
)

# Add CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(SecurityHeadersMiddleware())
app.middleware("http")(RequestContextMiddleware())

# Include routers
app.include_router(prompt_router)
app.include_router(proposal_router)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    """Reject malformed proposal input with the offending field"""
    logger.warning("invalid_input", field=exc.field, error=exc.error_code, detail=exc.message)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field": exc.field, "error": exc.error_code},
    )


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "ok", "environment": settings.environment,
            "timestamp": datetime.now().isoformat()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
