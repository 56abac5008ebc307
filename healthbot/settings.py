import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple
from healthbot.errors import ConfigError


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup."""
    api_key: str
    model: str = "gpt-4o"
    base_url: Optional[str] = None
    temperature: float = 0.2  # low for consistent medical responses
    host: str = "0.0.0.0"
    port: int = 5000
    allowed_origins: Tuple[str, ...] = ()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        api_key = env.get("OPENAI_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("Missing OPENAI_API_KEY in environment variables")

        origins_env = env.get("ALLOWED_ORIGINS", "")
        origins = tuple(o.strip() for o in origins_env.split(",") if o.strip())

        return cls(
            api_key=api_key,
            model=env.get("MODEL_NAME") or cls.model,
            base_url=env.get("OPENAI_BASE_URL") or None,
            temperature=_parse(env, "LLM_TEMPERATURE", float, cls.temperature),
            host=env.get("HOST") or cls.host,
            port=_parse(env, "PORT", int, cls.port),
            allowed_origins=origins,
        )


def _parse(env: Mapping[str, str], key: str, cast, default):
    raw = env.get(key)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid value for {key}: {raw!r}") from e
