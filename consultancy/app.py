import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from consultancy.routes import router
from consultancy import storage

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def cors_origins() -> list[str]:
    """Origins allowed to call the API, from comma-separated CORS_ORIGINS ("*" when unset)."""
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip()]


def create_app(data_dir: Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage.init_storage(resolved)

    app = FastAPI(title="Bhumi Consultancy API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(router, prefix="/api")
    return app


app = create_app()
