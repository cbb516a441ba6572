from __future__ import annotations

import logging
from typing import Any

from filerepo.app.settings import RepositoryConfig
from filerepo.database.filesystem import FileRepository
from filerepo.database.inmemory import InMemoryRepository
from filerepo.database.interfaces import Repository, T

logger = logging.getLogger(__name__)


def build_repository(
    model: type[T],
    *,
    config: RepositoryConfig | dict[str, Any] | None = None,
) -> Repository[T]:
    if not isinstance(config, RepositoryConfig):
        config = RepositoryConfig.model_validate(config or {})
    provider = config.provider
    logger.debug("Building %s repository for %s", provider, model.__name__)
    if provider == "inmemory":
        return InMemoryRepository(model, indent=config.indent)
    if provider == "filesystem":
        return FileRepository(
            model,
            data_dir=config.data_dir,
            extension=config.file_extension,
            indent=config.indent,
        )
    msg = f"Unsupported repository provider: {provider}"
    raise ValueError(msg)


__all__ = ["build_repository"]
