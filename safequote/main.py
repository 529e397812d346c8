"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from safequote.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="SafeQuote Vehicle Filters",
    description="Vehicle search filter synchronization and result rendering",
    version="0.1.0",
)

app.include_router(router)
