"""Chunker factory for creating chunker instances."""

from typing import Any

from loguru import logger

from ragsplit.config.models import DEFAULT_SEPARATORS, KeepSeparator, SplitterConfig
from ragsplit.errors import ConfigurationError
from ragsplit.tokenizer import BaseTokenizer
from .base import BaseChunker
from .length import get_length_function
from .providers.character import CharacterChunker
from .providers.recursive_character import RecursiveCharacterChunker
from .providers.token import TokenChunker


class ChunkerFactory:
    """Factory for creating chunker instances based on type.

    This factory maintains a registry of available chunker types
    and creates instances based on string identifiers.
    """

    _registry: dict[str, type[BaseChunker]] = {
        "character": CharacterChunker,
        "token": TokenChunker,
        "recursive": RecursiveCharacterChunker,
    }

    @classmethod
    def create(cls, chunker_type: str, **params: Any) -> BaseChunker:
        """Create a chunker instance by type.

        Args:
            chunker_type: Type identifier (e.g., "recursive")
            **params: Initialization parameters for the chunker

        Returns:
            Chunker instance

        Raises:
            ConfigurationError: If chunker type is not registered or params are invalid
        """
        if chunker_type not in cls._registry:
            available = ", ".join(cls._registry.keys())
            raise ConfigurationError(
                f"Unknown chunker type: '{chunker_type}'. "
                f"Available types: {available}",
                details={"chunker_type": chunker_type},
            )

        chunker_class = cls._registry[chunker_type]
        logger.debug(f"Creating {chunker_class.__name__} with params: {params}")

        return chunker_class(**params)

    @classmethod
    def from_config(
        cls, config: SplitterConfig, tokenizer: BaseTokenizer | None = None
    ) -> BaseChunker:
        """Create a chunker from a SplitterConfig.

        Separator and length settings only apply to the recursive chunker;
        the character and token chunkers have fixed length metrics.

        Args:
            config: Splitter configuration
            tokenizer: Tokenizer for token-based chunking (shared tokenizer if None)

        Returns:
            Chunker instance
        """
        params: dict[str, Any] = {
            "chunk_size": config.chunk_size,
            "chunk_overlap": config.chunk_overlap,
        }
        if config.type == "token":
            params["tokenizer"] = tokenizer
        elif config.type == "recursive":
            params.update(
                separators=config.separators,
                is_separator_regex=config.is_separator_regex,
                keep_separator=config.keep_separator,
                length_function=get_length_function(config.length_metric, tokenizer),
                strip_whitespace=config.strip_whitespace,
            )

        logger.info(f"Creating chunker from config: {config.type}")
        return cls.create(config.type, **params)

    @classmethod
    def create_default_recursive(cls) -> RecursiveCharacterChunker:
        """Recursive chunker with the ingestion pipeline's default profile."""
        return RecursiveCharacterChunker(
            chunk_size=500,
            chunk_overlap=50,
            separators=DEFAULT_SEPARATORS,
            keep_separator=KeepSeparator.NONE,
            strip_whitespace=True,
        )

    @classmethod
    def register(cls, chunker_type: str, chunker_class: type[BaseChunker]):
        """Register a new chunker type.

        Args:
            chunker_type: Type identifier
            chunker_class: Chunker class to register

        Raises:
            TypeError: If chunker_class is not a subclass of BaseChunker
        """
        if not issubclass(chunker_class, BaseChunker):
            raise TypeError(
                f"{chunker_class.__name__} must be a subclass of BaseChunker"
            )

        cls._registry[chunker_type] = chunker_class
        logger.info(f"Registered chunker type '{chunker_type}': {chunker_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        """Get list of available chunker types.

        Returns:
            List of registered chunker type identifiers
        """
        return list(cls._registry.keys())
