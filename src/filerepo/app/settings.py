import json
import logging
import os
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


def normalize_value(v: str) -> str:
    if isinstance(v, str):
        return v.strip().lower()
    return v


Normalize = BeforeValidator(normalize_value)


FILEREPO_CONFIG_ENV = "FILEREPO_CONFIG_PATH"
FILEREPO_CONFIG_DEFAULT = Path("config") / "filerepo.json"
FILEREPO_DATA_DIR_ENV = "FILEREPO_DATA_DIR"
FILEREPO_PROVIDER_ENV = "FILEREPO_PROVIDER"


class RepositoryConfig(BaseModel):
    provider: Annotated[Literal["filesystem", "inmemory"], Normalize] = "filesystem"
    data_dir: str = Field(default="data", description="Root directory holding one sub-directory per store.")
    file_extension: str = Field(default="json", description="Extension of record files, without the dot.")
    indent: int | None = Field(default=None, description="JSON indent used when writing records.")

    @field_validator("file_extension")
    @classmethod
    def strip_extension(cls, v: str) -> str:
        ext = v.strip().lstrip(".")
        if not ext:
            msg = "file_extension must not be empty"
            raise ValueError(msg)
        return ext


def resolve_config_path() -> Path:
    override = os.getenv(FILEREPO_CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path(FILEREPO_CONFIG_DEFAULT).expanduser()


def _load_json_file(path: Path) -> Any:
    if not path.exists():
        return None
    try:
        raw = path.read_text(encoding="utf-8")
        return json.loads(raw)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load JSON config from %s: %s", path, exc)
        return None


def _config_section(data: Any) -> dict[str, Any] | None:
    if not isinstance(data, dict):
        return None
    section = data.get("repository", data)
    if not isinstance(section, dict):
        logger.warning("filerepo config 'repository' must be an object")
        return None
    return dict(section)


def load_repository_config(overrides: dict[str, Any] | None = None) -> RepositoryConfig:
    """
    Build the repository config.

    Precedence, lowest first:
    - field defaults
    - config/filerepo.json (or FILEREPO_CONFIG_PATH)
    - FILEREPO_DATA_DIR / FILEREPO_PROVIDER
    - explicit ``overrides``

    Invalid file or env values are logged and dropped; the valid ones still apply.
    """
    path = resolve_config_path()
    values = _config_section(_load_json_file(path)) or {}
    if env_dir := os.getenv(FILEREPO_DATA_DIR_ENV):
        values["data_dir"] = env_dir
    if env_provider := os.getenv(FILEREPO_PROVIDER_ENV):
        values["provider"] = env_provider
    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
    try:
        return RepositoryConfig.model_validate({**values, **explicit})
    except ValidationError as exc:
        # Drop only the offending file/env keys; explicit overrides must be valid.
        invalid = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        logger.warning(
            "Ignoring invalid repository config values %s (config file %s): %s",
            sorted(invalid),
            path,
            exc,
        )
        kept = {k: v for k, v in values.items() if k not in invalid}
        return RepositoryConfig.model_validate({**kept, **explicit})
