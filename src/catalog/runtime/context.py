from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from pydantic import BaseModel

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.config_template import load_config

DEFAULT_CONFIG_PATH = Path("config.yaml")


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


# Loaded on first access so configuration errors surface inside the caller
_default_context: AppContext | None = None

_app_context: ContextVar[AppContext | None] = ContextVar(
    "app_context", default=None
)


def _load_default_context() -> AppContext:
    global _default_context
    if _default_context is None:
        _default_context = AppContext(config=load_config(DEFAULT_CONFIG_PATH))
    return _default_context


def get_context() -> AppContext:
    """Get the current application context.

    The default context is built from ``config.yaml`` the first time it is
    needed; errors loading it propagate to the caller.
    """
    return _app_context.get() or _load_default_context()


def set_context(context: AppContext) -> Token[AppContext | None]:
    """Set the current application context."""
    return _app_context.set(context)


def _recursive_model_dump_exclude_unset(model: BaseModel) -> dict:
    """Dump only the fields that were explicitly set, at every nesting level.

    A parent field is included in full when any of its nested fields was set.
    """
    result = {}
    explicitly_set_fields = model.model_fields_set

    for field_name in model.__class__.model_fields:
        field_value = getattr(model, field_name)

        if isinstance(field_value, BaseModel):
            if _recursive_model_dump_exclude_unset(field_value) or field_name in explicitly_set_fields:
                result[field_name] = field_value.model_dump()
        elif field_name in explicitly_set_fields:
            result[field_name] = field_value

    return result


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    """Recursively merge two dictionaries, values in override_dict winning."""
    result = base_dict.copy()

    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            result[key] = value

    return result


def _merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Merge the explicitly set parts of override_config into base_config."""
    base_dict = base_config.model_dump()
    override_dict = _recursive_model_dump_exclude_unset(override_config)
    merged_dict = _recursive_dict_merge(base_dict, override_dict)
    return ConfigData.model_validate(merged_dict)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily override the application configuration.

    Only fields explicitly set on ``config_override`` replace the current
    values; everything else is inherited from the enclosing context.

    Example:
        override = ConfigData()
        override.database.url = "sqlite:///:memory:"
        with with_context(override):
            assert get_config().database.url == "sqlite:///:memory:"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = _merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
