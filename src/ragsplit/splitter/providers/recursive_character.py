"""Recursive separator-hierarchy chunker.

This chunker implements a hierarchical splitting strategy similar to LangChain's
RecursiveCharacterTextSplitter: text is cut at the coarsest separator that
occurs in it, small fragments are greedily merged back into chunks with
overlap, and fragments that are still too large are split again with the
finer separators.
"""

import re

from loguru import logger

from ragsplit.config.models import DEFAULT_SEPARATORS, KeepSeparator
from ragsplit.errors import PatternError
from ragsplit.tokenizer import BaseTokenizer
from ..base import BaseChunker
from ..length import LengthFunction, TokenLength, character_length
from ..separators import Language, get_separators_for_language


class RecursiveCharacterChunker(BaseChunker):
    """Recursively chunks text using a hierarchy of separators.

    The default hierarchy tries, in order of preference:
    1. Double newlines (paragraphs)
    2. Single newlines (lines)
    3. Spaces (words)
    4. Characters (last resort)

    A fragment that is still too large once the hierarchy is exhausted is
    emitted as-is (an oversized leaf) and logged as a warning; use
    ``is_oversized`` to detect it.

    Attributes:
        chunk_size: Target maximum length per chunk
        chunk_overlap: Length to overlap between chunks
        separators: Separators in order of preference
        is_separator_regex: Whether separators are regular expressions
        keep_separator: Where matched separators are kept
        strip_whitespace: Whether merged chunks are trimmed
    """

    DEFAULT_SEPARATORS = DEFAULT_SEPARATORS

    chunking_method = "recursive_character"

    def __init__(
        self,
        chunk_size: int = 500,
        chunk_overlap: int = 50,
        separators: list[str] | tuple[str, ...] | None = None,
        is_separator_regex: bool = False,
        keep_separator: KeepSeparator | str = KeepSeparator.NONE,
        length_function: LengthFunction | None = None,
        strip_whitespace: bool = True,
    ):
        """Initialize the recursive character chunker.

        Args:
            chunk_size: Target maximum length per chunk
            chunk_overlap: Length to overlap between chunks
            separators: Custom separator list (uses defaults if None)
            is_separator_regex: Treat separators as regular expressions
            keep_separator: "none", "start" or "end"
            length_function: How to measure text (character count if None)
            strip_whitespace: Trim whitespace around merged chunks

        Raises:
            ConfigurationError: If chunk_size <= 0 or overlap >= chunk_size
            PatternError: If a separator is not a valid regular expression
        """
        super().__init__(chunk_size, chunk_overlap)

        self.separators = tuple(separators) if separators else self.DEFAULT_SEPARATORS
        self.is_separator_regex = is_separator_regex
        self.keep_separator = KeepSeparator(keep_separator)
        self.strip_whitespace = strip_whitespace
        self._length_function = length_function or character_length
        self._patterns = {
            separator: self._compile(separator)
            for separator in self.separators
            if separator
        }

        logger.info(
            f"Initialized RecursiveCharacterChunker: "
            f"size={chunk_size}, overlap={chunk_overlap}, "
            f"separators={len(self.separators)}, keep_separator={self.keep_separator}"
        )

    @classmethod
    def from_language(cls, language: Language | str, **kwargs) -> "RecursiveCharacterChunker":
        """Create a chunker with the separator hierarchy for a programming language."""
        return cls(separators=get_separators_for_language(language), **kwargs)

    @classmethod
    def from_tokenizer(
        cls, tokenizer: BaseTokenizer | None = None, **kwargs
    ) -> "RecursiveCharacterChunker":
        """Create a chunker that measures chunk_size and overlap in tokens."""
        return cls(length_function=TokenLength(tokenizer), **kwargs)

    @property
    def length_function(self) -> LengthFunction:
        return self._length_function

    def is_oversized(self, chunk: str) -> bool:
        """Whether ``chunk`` exceeds chunk_size (only oversized leaves can)."""
        return self._length_function(chunk) > self.chunk_size

    def split_text(self, text: str) -> list[str]:
        if not text:
            return []

        if self._length_function(text) <= self.chunk_size:
            if self.strip_whitespace and not text.strip():
                return []
            return [text]

        return self._split_text_recursive(text, self.separators)

    def _split_text_recursive(self, text: str, separators: tuple[str, ...]) -> list[str]:
        """Recursively split text using a hierarchy of separators.

        Args:
            text: Text to split
            separators: Separators still available at this level

        Returns:
            List of text chunks
        """
        final_chunks = []

        # Pick the first separator that occurs in the text
        separator = separators[-1]
        new_separators: tuple[str, ...] = ()
        for i, candidate in enumerate(separators):
            if candidate == "":
                separator = candidate
                break
            if self._patterns[candidate].search(text):
                separator = candidate
                new_separators = separators[i + 1:]
                break

        splits, join_separator = self._split_by_separator(text, separator)

        good_splits = []
        for split in splits:
            if self._length_function(split) < self.chunk_size:
                good_splits.append(split)
                continue

            # Flush accumulated small pieces before handling the large one
            if good_splits:
                final_chunks.extend(self.merge_splits(good_splits, join_separator))
                good_splits = []

            if not new_separators:
                logger.warning(
                    f"Emitting oversized chunk of size {self._length_function(split)}: "
                    f"no finer separator left (chunk_size={self.chunk_size})"
                )
                final_chunks.append(split)
            else:
                final_chunks.extend(self._split_text_recursive(split, new_separators))

        if good_splits:
            final_chunks.extend(self.merge_splits(good_splits, join_separator))

        return final_chunks

    def _split_by_separator(self, text: str, separator: str) -> tuple[list[str], str]:
        """Split text by a separator according to keep_separator.

        Args:
            text: Text to split
            separator: Separator (literal or regex source)

        Returns:
            Non-empty fragments and the separator to rejoin them with
        """
        if separator == "":
            return list(text), ""

        pieces = []
        matched = []
        last = 0
        for match in self._patterns[separator].finditer(text):
            pieces.append(text[last:match.start()])
            matched.append(match.group(0))
            last = match.end()
        pieces.append(text[last:])

        if self.keep_separator == KeepSeparator.END:
            splits = [piece + sep for piece, sep in zip(pieces, matched)] + [pieces[-1]]
        elif self.keep_separator == KeepSeparator.START:
            splits = [pieces[0]] + [sep + piece for sep, piece in zip(matched, pieces[1:])]
        else:
            splits = pieces

        if self.keep_separator != KeepSeparator.NONE:
            # Separators are already embedded in the fragments
            join_separator = ""
        elif self.is_separator_regex:
            join_separator = next((m for m in matched if m), "")
        else:
            join_separator = separator

        return [s for s in splits if s], join_separator

    def merge_splits(self, splits: list[str], separator: str) -> list[str]:
        """Greedily merge fragments into chunks no longer than chunk_size.

        After a chunk is closed, fragments are dropped from its front until
        what remains fits in chunk_overlap and leaves room for the next
        fragment; the remainder seeds the next chunk.

        Args:
            splits: Fragments in text order
            separator: Separator to join fragments with

        Returns:
            List of merged chunks
        """
        separator_len = self._length_function(separator)

        docs = []
        current_doc: list[str] = []
        total = 0

        for split in splits:
            split_len = self._length_function(split)

            if total + split_len + (separator_len if current_doc else 0) > self.chunk_size:
                if total > self.chunk_size:
                    logger.warning(
                        f"Created a chunk of size {total}, "
                        f"which is longer than the specified {self.chunk_size}"
                    )

                if current_doc:
                    doc = self._join_docs(current_doc, separator)
                    if doc is not None:
                        docs.append(doc)

                    # Keep a tail of the closed chunk as overlap for the next one
                    while current_doc and (
                        total > self.chunk_overlap
                        or total + split_len + (separator_len if current_doc else 0) > self.chunk_size
                    ):
                        total -= self._length_function(current_doc[0])
                        total -= separator_len if len(current_doc) > 1 else 0
                        current_doc.pop(0)

            current_doc.append(split)
            total += split_len + (separator_len if len(current_doc) > 1 else 0)

        doc = self._join_docs(current_doc, separator)
        if doc is not None:
            docs.append(doc)

        return docs

    def _join_docs(self, docs: list[str], separator: str) -> str | None:
        text = separator.join(docs)
        if self.strip_whitespace:
            text = text.strip()
        return text or None

    def _compile(self, separator: str) -> re.Pattern:
        if not self.is_separator_regex:
            return re.compile(re.escape(separator))
        try:
            pattern = re.compile(separator)
        except re.error as e:
            raise PatternError(separator, original_error=e) from e
        if pattern.fullmatch(""):
            raise PatternError(
                separator, message=f"Separator pattern matches the empty string: {separator!r}"
            )
        return pattern

    def _chunk_metadata(self, chunk_text: str) -> dict:
        size = self._length_function(chunk_text)
        return {"chunk_size": size, "oversized": size > self.chunk_size}
