#!/usr/bin/env python3
"""Corpus file loading."""

import logging
from pathlib import Path
from typing import Iterable, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_corpus(paths: Iterable[PathLike], encoding: str = 'utf-8') -> str:
    """
    Read corpus files and join their contents with newlines.

    Args:
        paths: One or more text files
        encoding: Text encoding of the files

    Raises:
        FileNotFoundError: If a file does not exist
        ValueError: If no paths are given
    """
    if isinstance(paths, (str, Path)):
        paths = [paths]

    texts = []
    for path in paths:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Corpus file not found: {path}")
        texts.append(path.read_text(encoding=encoding))
        logger.debug(f"Read {path} ({len(texts[-1])} chars)")

    if not texts:
        raise ValueError("At least one corpus file is required")

    corpus = "\n".join(texts)
    logger.info(f"Loaded corpus from {len(texts)} file(s), {len(corpus)} chars")
    return corpus
