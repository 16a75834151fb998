"""viteforge configuration.

Typed configuration for the template engine and the scaffolder.  All settings
use Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or built from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

PACKAGE_DIR = Path(__file__).parent
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates" / "dynamic"
DEFAULT_TEST_TEMPLATES_DIR = PACKAGE_DIR / "templates" / "test-templates"

PackageManager = Literal["npm", "yarn", "pnpm", "bun"]


class EngineConfig(BaseModel):
    """Settings for one :class:`~viteforge.templating.TemplateEngine`."""

    templates_dir: Path = Field(default=DEFAULT_TEMPLATES_DIR)
    partials_subdir: str = Field(default="partials")
    extension: str = Field(default=".hbs", pattern=r"^\.[\w.]+$")
    max_partial_depth: int = Field(
        default=32, ge=1, description="Deepest chain of partials including partials"
    )
    compile_cache_size: int = Field(
        default=256, ge=1, description="Parsed templates kept per engine"
    )
    verbose: bool = Field(
        default=False, description="Print recovered render problems to the console"
    )

    @property
    def partials_dir(self) -> Path:
        """Directory that holds the partials (``<templates_dir>/partials``)."""
        return self.templates_dir / self.partials_subdir


class ScaffoldConfig(BaseModel):
    """Global scaffolding configuration.

    Created once by the CLI (or by the caller) and passed to the project
    generator.
    """

    project_name: str = Field(default="my-app")
    author: str = Field(default="")
    description: str = Field(default="")
    license: str = Field(default="MIT")
    output_dir: Path = Field(default=Path("."))
    package_manager: PackageManager = Field(default="npm")
    test_templates_dir: Path = Field(default=DEFAULT_TEST_TEMPLATES_DIR)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @property
    def project_path(self) -> Path:
        """Root of the project that will be generated."""
        return self.output_dir / self.project_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            VITEFORGE_PROJECT_NAME, VITEFORGE_AUTHOR, VITEFORGE_LICENSE,
            VITEFORGE_OUTPUT_DIR, VITEFORGE_PACKAGE_MANAGER,
            VITEFORGE_TEMPLATES_DIR, VITEFORGE_TEST_TEMPLATES_DIR,
            VITEFORGE_TEMPLATE_EXTENSION, VITEFORGE_VERBOSE.
        """
        engine_kwargs: dict[str, Any] = {}
        if os.environ.get("VITEFORGE_TEMPLATES_DIR"):
            engine_kwargs["templates_dir"] = Path(os.environ["VITEFORGE_TEMPLATES_DIR"])
        if os.environ.get("VITEFORGE_TEMPLATE_EXTENSION"):
            engine_kwargs["extension"] = os.environ["VITEFORGE_TEMPLATE_EXTENSION"]
        if os.environ.get("VITEFORGE_VERBOSE"):
            engine_kwargs["verbose"] = os.environ["VITEFORGE_VERBOSE"].lower() in ("1", "true", "yes")

        kwargs: dict[str, Any] = {"engine": EngineConfig(**engine_kwargs)}
        if os.environ.get("VITEFORGE_PROJECT_NAME"):
            kwargs["project_name"] = os.environ["VITEFORGE_PROJECT_NAME"]
        if os.environ.get("VITEFORGE_AUTHOR"):
            kwargs["author"] = os.environ["VITEFORGE_AUTHOR"]
        if os.environ.get("VITEFORGE_LICENSE"):
            kwargs["license"] = os.environ["VITEFORGE_LICENSE"]
        if os.environ.get("VITEFORGE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["VITEFORGE_OUTPUT_DIR"])
        if os.environ.get("VITEFORGE_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["VITEFORGE_PACKAGE_MANAGER"]
        if os.environ.get("VITEFORGE_TEST_TEMPLATES_DIR"):
            kwargs["test_templates_dir"] = Path(os.environ["VITEFORGE_TEST_TEMPLATES_DIR"])

        return cls(**kwargs)
