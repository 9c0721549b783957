# ♥♥─── Settings Model ───────────────────────────────────────────────────────────
from __future__ import annotations

from typing import Any, Literal
from pathlib import Path
from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tasktui.core.models import Language, ThemeMode


LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


@lru_cache
def get_project_root() -> Path:
	"""Detect the project root intelligently."""
	current = Path.cwd()
	for parent in [current, *list(current.parents)]:
		if any((parent / indicator).exists() for indicator in ["pyproject.toml", ".git"]):
			return parent
	return current


root = get_project_root()


@lru_cache
def get_default_env_path() -> Path:
	"""Get the default path for the main environment file."""
	return root / "app_data/config/.env"


ENV_DEFAULT_CONTENT = """# TaskTUI Configuration File
# ─── Storage ───────────────────────────────────────────────────────
# TASKTUI_STORAGE__FILENAME=storage.json
# ─── Preferences ───────────────────────────────────────────────────
# TASKTUI_PREFERENCES__DEFAULT_LANGUAGE=en
# TASKTUI_PREFERENCES__DEFAULT_THEME=light
# ─── Logging ───────────────────────────────────────────────────────
# TASKTUI_LOGGING__CONSOLE_LEVEL=WARNING
# TASKTUI_LOGGING__FILE_LEVEL=INFO
"""


# ─── Configuration Paths Component ────────────────────────────────────────────
class ConfigPaths(BaseSettings):
	"""Application directory structure."""

	model_config = SettingsConfigDict(env_prefix="TASKTUI_PATHS_", case_sensitive=False, extra="ignore")

	app_data_dir: Path = Field(
		default=root / "app_data",
		title="Application Data Directory",
		description="Base directory for storage, configuration and logs.",
	)

	@computed_field
	@property
	def config_dir(self) -> Path:
		"""Directory containing configuration files.

		:return: The path to the configuration directory.
		"""
		return self.app_data_dir / "config"

	@computed_field
	@property
	def env_file_path(self) -> Path:
		"""The path to the main .env configuration file.

		:return: The path to the .env file.
		"""
		return self.config_dir / ".env"

	@computed_field
	@property
	def log_dir(self) -> Path:
		"""Directory holding the rotating log files.

		:return: The path to the log directory.
		"""
		return self.app_data_dir / "logs"

	def model_post_init(self, __context: Any | None = None, /) -> None:
		"""Ensure the configuration directory exists after initialization."""
		self.config_dir.mkdir(parents=True, exist_ok=True)


# ─── Storage Configuration ────────────────────────────────────────────────────
class StorageSettings(BaseSettings):
	"""Where the key-value store lives."""

	model_config = SettingsConfigDict(env_prefix="TASKTUI_STORAGE_", case_sensitive=False, extra="ignore")

	filename: str = Field(
		default="storage.json",
		title="Storage File Name",
		description="JSON file holding the tasks, language and theme entries.",
		min_length=1,
		max_length=255,
	)


# ─── Preference Defaults ──────────────────────────────────────────────────────
class PreferenceSettings(BaseSettings):
	"""Defaults used when nothing has been stored yet."""

	model_config = SettingsConfigDict(env_prefix="TASKTUI_PREFERENCES_", case_sensitive=False, extra="ignore")

	default_language: Language = Field(default=Language.EN, title="Default Language")
	default_theme: ThemeMode = Field(default=ThemeMode.LIGHT, title="Default Theme")


# ─── Logging Configuration ────────────────────────────────────────────────────
class LoggingSettings(BaseSettings):
	"""Log levels for the console and file sinks."""

	model_config = SettingsConfigDict(env_prefix="TASKTUI_LOGGING_", case_sensitive=False, extra="ignore")

	console_level: LogLevel = Field(default="WARNING", title="Console Log Level")
	file_level: LogLevel = Field(default="INFO", title="File Log Level")
	log_file: str = Field(default="app.log", title="Log File Name", min_length=1)


# ─── Main Application Settings ────────────────────────────────────────────────
class ApplicationSettings(BaseSettings):
	"""Root settings object; nested sections use ``__`` in environment names."""

	model_config = SettingsConfigDict(
		env_prefix="TASKTUI_",
		env_nested_delimiter="__",
		env_file=get_default_env_path(),
		env_file_encoding="utf-8",
		case_sensitive=False,
		extra="ignore",
	)

	paths: ConfigPaths = Field(default_factory=ConfigPaths)
	storage: StorageSettings = Field(default_factory=StorageSettings)
	preferences: PreferenceSettings = Field(default_factory=PreferenceSettings)
	logging: LoggingSettings = Field(default_factory=LoggingSettings)

	def get_storage_file_path(self) -> Path:
		"""Full path of the key-value storage file.

		:return: The storage file path.
		"""
		return self.paths.app_data_dir / self.storage.filename

	def ensure_env_file(self) -> None:
		"""Write a commented template .env file if none exists yet."""
		env_path = self.paths.env_file_path
		if not env_path.exists():
			env_path.write_text(ENV_DEFAULT_CONTENT, encoding="utf-8")
