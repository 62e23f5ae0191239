"""Application level helpers for assembling the archive."""
from __future__ import annotations

from typing import Optional
import logging

from .archive import Archive, build_archive
from .clients import HTTPSource, LocalSource, load_sources
from .clients.sources import DocumentSource
from .config import AppConfig

LOGGER = logging.getLogger(__name__)


def create_source(config: AppConfig) -> DocumentSource:
    sources = config.sources
    if sources.base_url:
        LOGGER.info("Reading archive documents from %s", sources.base_url)
        return HTTPSource(sources.base_url, timeout=sources.timeout, max_retries=sources.max_retries)
    LOGGER.info("Reading archive documents from %s", sources.data_dir)
    return LocalSource(sources.data_dir)


def create_archive(config: AppConfig, *, source: Optional[DocumentSource] = None) -> Archive:
    """Load and reconcile the archive described by ``config``.

    A caller-provided ``source`` is used as is and left open.
    """

    owns_source = source is None
    document_source = source or create_source(config)
    try:
        return build_archive(load_sources(document_source))
    finally:
        if owns_source and isinstance(document_source, HTTPSource):
            document_source.close()


__all__ = ["create_archive", "create_source"]
