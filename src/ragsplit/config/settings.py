import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .models import SplitterConfig

# Load .env file from the project root
# This file: src/ragsplit/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()

class Settings(BaseModel):
    """Global Application Settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Tokenizer
    TOKENIZER_ENCODING: str = Field(default="cl100k_base", description="tiktoken encoding name")

    # Ingestion chunking profile
    CHUNK_SIZE: int = Field(default=500, description="Chunk size in length units")
    CHUNK_OVERLAP: int = Field(default=50, description="Overlap between consecutive chunks")
    SPLITTER_TYPE: str = Field(default="recursive", description="Splitter type: character, token, recursive")

    model_config = {
        "frozen": True,
    }

def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        ENV=os.getenv("ENV", "development"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        TOKENIZER_ENCODING=os.getenv("TOKENIZER_ENCODING", "cl100k_base"),
        CHUNK_SIZE=int(os.getenv("CHUNK_SIZE", "500")),
        CHUNK_OVERLAP=int(os.getenv("CHUNK_OVERLAP", "50")),
        SPLITTER_TYPE=os.getenv("SPLITTER_TYPE", "recursive"),
    )

def default_splitter_config() -> SplitterConfig:
    """Splitter configuration for the ingestion pipeline, taken from settings."""
    return SplitterConfig(
        type=settings.SPLITTER_TYPE,
        chunk_size=settings.CHUNK_SIZE,
        chunk_overlap=settings.CHUNK_OVERLAP,
    )

# Global settings instance
settings = load_settings()
