import os
from typing import Optional, Dict
from pydantic import BaseModel, Field, ConfigDict, field_validator


ENV_PREFIX = "CATGQL_"

_ENV_LOADED = False


def _load_env_file(path: str, allow_override: bool = False) -> None:
    """
    Minimal .env loader: loads KEY=VALUE pairs into os.environ.
    - Ignores empty lines and lines starting with '#'
    - Supports values wrapped in single or double quotes
    - By default, does not override existing environment variables
    """
    if not path or not os.path.exists(path):
        return
    with open(path, "r", encoding="utf-8") as f:
        for raw_line in f:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[len("export "):].strip()
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip()
            if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
                value = value[1:-1]
            if allow_override or key not in os.environ:
                os.environ[key] = value


def load_env_if_present(force_reload: bool = False) -> None:
    """
    Load environment variables from .env files.
    CATGQL_ENV_FILE names a single file; otherwise .env.local then .env are
    read, the first one to set a variable wins.
    """
    global _ENV_LOADED
    if _ENV_LOADED and not force_reload:
        return

    custom = os.environ.get("CATGQL_ENV_FILE")
    if custom:
        _load_env_file(custom)
    else:
        for env_file in ('.env.local', '.env'):
            _load_env_file(env_file)

    _ENV_LOADED = True


class Settings(BaseModel):
    """
    catgql settings from environment variables.
    """
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    app_name: str = "catgql"

    host: str = Field(default="0.0.0.0", alias="CATGQL_HOST")
    port: int = Field(default=8088, alias="CATGQL_PORT")
    debug: bool = Field(default=False, alias="CATGQL_DEBUG")
    log_json: bool = Field(default=False, alias="CATGQL_LOG_JSON")

    seed_samples: bool = Field(default=True, alias="CATGQL_SEED_SAMPLES")

    # Strawberry endpoint
    enable_graphql: bool = Field(default=True, alias="CATGQL_ENABLE_GRAPHQL")
    graphql_prefix: str = Field(default="/api/graphql", alias="CATGQL_GRAPHQL_PREFIX")

    @field_validator('host', 'graphql_prefix', mode='before')
    def validate_not_empty_str(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Value cannot be empty or whitespace only")
        return v.strip()

    @field_validator('debug', 'log_json', 'seed_samples', 'enable_graphql', mode='before')
    def coerce_bool(cls, v):
        if isinstance(v, bool):
            return v
        if not isinstance(v, str):
            raise ValueError("Expected string for boolean field")
        val = v.strip().lower()
        if val in ("true", "1", "yes", "y", "on"):
            return True
        if val in ("false", "0", "no", "n", "off"):
            return False
        raise ValueError(f"Invalid boolean value: {v}")

    @field_validator('port', mode='before')
    def coerce_port(cls, v):
        if isinstance(v, str):
            v = int(v.strip())
        if not isinstance(v, int) or v < 1 or v > 65535:
            raise ValueError(f"Invalid port number: {v}")
        return v

    @field_validator('graphql_prefix')
    def normalize_prefix(cls, v):
        prefix = "/" + v.strip("/")
        if prefix == "/":
            raise ValueError("GraphQL prefix cannot be the root path")
        return prefix


_settings: Optional[Settings] = None


def settings_from_env(environ: Optional[Dict[str, str]] = None) -> Settings:
    environ = os.environ if environ is None else environ
    values = {key: value for key, value in environ.items() if key.startswith(ENV_PREFIX)}
    return Settings(**values)


def get_settings(reload: bool = False) -> Settings:
    """
    Get application settings. Parses environment variables on first call.
    Set reload=True to force reloading from current environment.
    """
    global _settings
    if _settings is None or reload:
        load_env_if_present(force_reload=reload)
        _settings = settings_from_env()
    return _settings
