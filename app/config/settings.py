import os
from pathlib import Path
from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"


# A missing MONGODB_URI must not stop the application: the health check reports it
# and database routes surface it as a configuration error on first connection.
class Settings:
    # Read MONGODB_URI, database and collection names from environment.
    def __init__(self):
        # Load .env in __init__ to ensure it works in Uvicorn's child processes
        if ENV_PATH.exists():
            load_dotenv(dotenv_path=ENV_PATH, override=False)

        self.MONGODB_URI = os.environ.get("MONGODB_URI", "").strip()

        self.CANDIDATE_DATABASE = os.environ.get("CANDIDATE_DATABASE", "candidate_management").strip()
        self.LEGACY_DATABASE = os.environ.get("LEGACY_DATABASE", "candidatedb").strip()
        self.CANDIDATES_COLLECTION = os.environ.get("CANDIDATES_COLLECTION", "candidates").strip()
        self.HISTORY_COLLECTION = os.environ.get("HISTORY_COLLECTION", "history").strip()

        for attr, value in {
            "CANDIDATE_DATABASE": self.CANDIDATE_DATABASE,
            "LEGACY_DATABASE": self.LEGACY_DATABASE,
            "CANDIDATES_COLLECTION": self.CANDIDATES_COLLECTION,
            "HISTORY_COLLECTION": self.HISTORY_COLLECTION,
        }.items():
            if not value:
                raise ValueError(f"{attr} environment variable must not be empty.")

        self.ENVIRONMENT = os.environ.get("ENVIRONMENT", "").strip() or "development"
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

        timeout_raw = os.environ.get("MONGO_SERVER_SELECTION_TIMEOUT_MS", "").strip()
        self.MONGO_SERVER_SELECTION_TIMEOUT_MS = int(timeout_raw) if timeout_raw else None
        if self.MONGO_SERVER_SELECTION_TIMEOUT_MS is not None and self.MONGO_SERVER_SELECTION_TIMEOUT_MS <= 0:
            raise ValueError("MONGO_SERVER_SELECTION_TIMEOUT_MS must be a positive integer.")

        self.HOST = os.environ.get("HOST", "0.0.0.0").strip()
        port_raw = os.environ.get("PORT", "8000").strip()
        self.PORT = int(port_raw)

        self.HISTORY_LIMIT = 100

    @property
    def mongo_configured(self) -> bool:
        return bool(self.MONGODB_URI)


def get_settings() -> Settings:
    """FastAPI dependency: settings are re-read per request, like the process environment."""
    return Settings()
