"""Application state and configuration."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import platformdirs
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from commitprobe.core.base import BaseConfig, BaseState
from commitprobe.core.log import Logger
from commitprobe.core.result import CheckResult
from commitprobe.core.yaml_settings import (
    CONFIG_FILENAME,
    YamlWithIncludesSettingsSource,
)

# Usable in YAML values: {platformdirs.user_state_dir}
TEMPLATE_NAMESPACE = {
    'platformdirs': platformdirs,
}

# ============================================================
# CONFIG MODELS (loaded from YAML/env/CLI)
# ============================================================


class Marker(BaseConfig):
    """A literal substring a collaborator file must contain."""

    name: str = Field(description="Check name shown in the report")
    text: str = Field(description="Literal substring to look for")
    found: str = Field(
        default="present",
        description="Message recorded when the substring is present",
    )
    missing: str = Field(
        default="missing",
        description="Message recorded when the substring is absent",
    )


class ScriptConfig(BaseConfig):
    """The commit shell script under inspection."""

    path: Path = Field(
        default=Path("git.sh"),
        description="Script path, relative to project_root",
    )
    markers: list[Marker] = Field(
        default_factory=list,
        description="Substrings the script must contain",
    )
    syntax_command: str = Field(
        default="bash -n {path}",
        description=(
            "Shell syntax check; {path} is replaced with the quoted "
            "script path"
        ),
    )


class WorkflowConfig(BaseConfig):
    """The CI workflow file under inspection."""

    path: Path = Field(
        default=Path(".github/workflows/auto-commit.yml"),
        description="Workflow path, relative to project_root",
    )
    markers: list[Marker] = Field(
        default_factory=list,
        description="Substrings the workflow must contain",
    )


class ScratchConfig(BaseConfig):
    """Scratch directory used to rehearse installing the script."""

    dir: Path = Field(
        default=Path("test-temp"),
        description="Scratch directory, relative to project_root",
    )
    chmod_command: str = Field(
        default="chmod +x {path}",
        description=(
            "Command that marks the copied script executable; {path} "
            "is replaced with the quoted copy path"
        ),
    )


class Config(BaseConfig):
    """Application configuration loaded from YAML/env/CLI."""

    logger: Logger = Field(
        default=None,
        description="Logger configuration and runtime instance"
    )
    project_root: Path = Field(
        default=Path("."),
        description="Directory holding the files under inspection",
    )
    script: ScriptConfig = Field(
        default_factory=ScriptConfig,
        description="Shell script checks",
    )
    workflow: WorkflowConfig = Field(
        default_factory=WorkflowConfig,
        description="CI workflow checks",
    )
    scratch: ScratchConfig = Field(
        default_factory=ScratchConfig,
        description="Scratch directory settings",
    )
    timeout: int | None = Field(
        default=None,
        description="Timeout in seconds for external commands",
    )
    log_root: Path = Field(
        default_factory=(
            lambda: Path(platformdirs.user_state_dir()) / "commitprobe"
        ),
        description=(
            "Root directory for log files "
            "(supports {platformdirs.*} templates)"
        ),
    )

    def resolve(self, path: Path) -> Path:
        """Anchor a configured path at project_root."""
        path = Path(path).expanduser()
        if path.is_absolute():
            return path
        return self.project_root / path

    @property
    def script_path(self) -> Path:
        return self.resolve(self.script.path)

    @property
    def workflow_path(self) -> Path:
        return self.resolve(self.workflow.path)

    @property
    def scratch_dir(self) -> Path:
        return self.resolve(self.scratch.dir)

    @model_validator(mode='after')
    def _default_logger(self) -> Config:
        if self.logger is None:
            self.logger = Logger()
        return self

    def setup_logger(self, run_name: str):
        """Start the global logger from the logger section.

        Args:
            run_name: Names the log directory and the service
        """
        from commitprobe.core.log import setup_logger

        setup_logger(
            log_root=self.log_root,
            run_name=run_name,
            console=self.logger.console,
            file=self.logger.file,
            logfire=self.logger.logfire,
            level=self.logger.level,
        )

    def close(self):
        """Close the global logger, then the rest of the config."""
        from commitprobe.core.log import logger
        logger.close()

        super().close()


# ============================================================
# RUNTIME STATE MODELS (mutable during workflow execution)
# ============================================================


class VerifyState(BaseState):
    """Verify workflow runtime state."""

    results: list[CheckResult] = Field(
        default_factory=list,
        description="Check results in the order the checks ran",
    )
    runner: Any = Field(
        default=None,
        description=(
            "CommandRunner used for external commands; a fresh Runner "
            "when unset"
        ),
    )
    scratch_dir: Path | None = Field(
        default=None,
        description="Scratch directory created by this run",
    )
    status: str = Field(
        default="pending",
        description="pending, running, complete, failed",
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)


class CleanState(BaseState):
    """Clean workflow runtime state."""

    removed: bool = Field(
        default=False,
        description="Whether a scratch directory was removed",
    )


class Runtime(BaseModel):
    """All runtime state organized by workflow."""

    verify: VerifyState = Field(
        default_factory=VerifyState,
        description="Verify workflow runtime state"
    )
    clean: CleanState = Field(
        default_factory=CleanState,
        description="Clean workflow runtime state"
    )


# ============================================================
# STATE (config + runtime combined)
# ============================================================


class State(BaseSettings):
    """Complete application state: configuration plus runtime.

    This is the object passed to every workflow node. Being a
    BaseSettings, it loads from YAML, .env, environment variables
    and CLI arguments, and validates everything on load.
    """

    config: Config = Field(
        default_factory=Config,
        description="Application configuration (from YAML/env/CLI)",
    )
    runtime: Runtime = Field(
        default_factory=Runtime,
        description="Runtime state (mutates during workflow execution)",
    )
    include: list[str] | None = Field(
        default=None,
        description=(
            "Additional YAML files to include and merge. "
            "Use --include on CLI or include: in YAML files."
        ),
    )

    model_config = SettingsConfigDict(
        yaml_file=CONFIG_FILENAME,
        env_file=".env",
        env_prefix="COMMITPROBE_",
        env_nested_delimiter="__",
        cli_parse_args=True,
        cli_implicit_flags=True,
        cli_use_class_docs_for_groups=True,
        arbitrary_types_allowed=True,
        extra='ignore'
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority, highest first: init arguments, environment,
        .env, YAML files, file secrets.

        The package defaults set every key, so anything ranked below
        the YAML source could never take effect.
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlWithIncludesSettingsSource(settings_cls),
            file_secret_settings,
        )

    @model_validator(mode="after")
    def substitute_templates(self) -> State:
        """Replace {config.*} and {platformdirs.*} templates in every
        string and Path field."""
        self._substitute_recursive(self.config)
        return self

    @model_validator(mode="after")
    def _start_logger(self) -> State:
        """Start logging once templates in log_root are resolved."""
        self.config.setup_logger(self.run_name())
        return self

    def run_name(self) -> str:
        """Name of this run: log subdirectory and service suffix."""
        return "commitprobe"

    def _substitute_recursive(self, obj: Any) -> None:
        if isinstance(obj, BaseModel):
            for field_name in obj.__class__.model_fields:
                value = getattr(obj, field_name)
                new_value = self._substitute_value(value)
                if new_value is not value:
                    setattr(obj, field_name, new_value)
        elif isinstance(obj, dict):
            for key in obj:
                obj[key] = self._substitute_value(obj[key])
        elif isinstance(obj, list):
            for i in range(len(obj)):
                obj[i] = self._substitute_value(obj[i])

    def _substitute_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return self._substitute_string(value)
        elif isinstance(value, Path):
            substituted = self._substitute_string(str(value))
            return value if substituted == str(value) else Path(substituted)
        elif isinstance(value, (BaseModel, dict, list)):
            self._substitute_recursive(value)
            return value
        return value

    def _substitute_string(self, value: str) -> str:
        """Replace {dotted.path} templates with the values they name.

        Unresolvable templates, such as the {path} placeholder in
        command strings, are left as they are.

        Examples:
            "{config.project_root}/scripts" → "/home/user/repo/scripts"
            "{platformdirs.user_state_dir}" → "~/.local/state/commitprobe"
        """
        def replace_template(match):
            parts = match.group(1).split(".")

            namespaced = parts[0] in TEMPLATE_NAMESPACE
            if namespaced:
                obj = TEMPLATE_NAMESPACE[parts[0]]
                parts = parts[1:]
            else:
                obj = self

            try:
                for part in parts:
                    obj = getattr(obj, part)
            except AttributeError:
                return match.group(0)

            # Only platformdirs functions are called; methods such as
            # State.run_name are not template values
            if callable(obj):
                if not namespaced:
                    return match.group(0)
                obj = obj('commitprobe', appauthor=False)

            return str(obj)

        return re.sub(r'\{([a-z._]+)\}', replace_template, value)


__all__ = ["State", "Config", "Marker", "BaseConfig", "BaseState"]
