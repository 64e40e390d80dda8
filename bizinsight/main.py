from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bizinsight.ai.chat.router import router as chat_router
from bizinsight.business.router import router as profile_router
from bizinsight.config import get_client_base_url


def get_version() -> str:
    """Get the installed package version."""
    try:
        return version("bizinsight")
    except PackageNotFoundError:
        return "0.0.0"


app = FastAPI(
    title="BizInsight API",
    description="Business insights chat assistant",
    version=get_version(),
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_client_base_url()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profile_router, prefix="/api")
app.include_router(chat_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {"status": "ok", "message": "BizInsight API is running"}


@app.get("/healthcheck")
async def healthcheck():
    """Health check endpoint."""
    return {"status": "ok", "message": "BizInsight API is running"}
