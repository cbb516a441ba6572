from filerepo.app.settings import (
    RepositoryConfig,
    load_repository_config,
    resolve_config_path,
)

__all__ = [
    "RepositoryConfig",
    "load_repository_config",
    "resolve_config_path",
]
