"""FastAPI application entry point"""

import os
from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables before config-reading modules are imported
load_dotenv()

from api_server.middleware import setup_cors, setup_rate_limit, setup_logging, LoggingMiddleware
from api_server.routes import health_router, debate_router

logger = setup_logging()

app = FastAPI(
    title="AI Debate API",
    description="Scripted multi-turn AI debates with a fixed cadence and content guardrails",
    version="1.0.0",
)

setup_cors(app)
setup_rate_limit(app)
app.add_middleware(LoggingMiddleware)

app.include_router(health_router)
app.include_router(debate_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "AI Debate API",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    uvicorn.run(
        "api_server.main:app",
        host=host,
        port=port,
        reload=os.getenv("RELOAD", "off") == "on",
    )
