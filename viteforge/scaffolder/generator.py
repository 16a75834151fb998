"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` plus the selected ``FeatureFlags`` and writes a
React + Vite project directory: rendered application sources, generated test
files and ``package.json``.  Initialising git and installing dependencies are
left to the caller.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

from ..config import EngineConfig, ScaffoldConfig
from ..templating import TemplateEngine, TemplateError
from ..utils import write_text_file
from .features import FeatureFlags, ProjectMetadata
from .package_json import build_package_json
from .sources import SourceFileGenerator
from .test_gen import TestGenerator


class ProjectExistsError(TemplateError, FileExistsError):
    """Raised when the target project directory already exists."""


class ProjectGenerator:
    """Generates a complete project directory for a set of features."""

    def __init__(self, config: ScaffoldConfig, features: FeatureFlags) -> None:
        self.config = config
        self.features = features
        self.metadata = ProjectMetadata(
            project_name=config.project_name,
            author=config.author,
            description=config.description,
            license=config.license,
        )
        self.engine = TemplateEngine(config=config.engine)
        self.sources = SourceFileGenerator(
            features, self.metadata, self.engine, package_manager=config.package_manager
        )
        self.tests: Optional[TestGenerator] = None
        if features.testing:
            test_engine = TemplateEngine(
                config=EngineConfig(
                    templates_dir=config.test_templates_dir,
                    extension=config.engine.extension,
                    verbose=config.engine.verbose,
                )
            )
            self.tests = TestGenerator(features, engine=test_engine)

    # -- Public API --------------------------------------------------------

    def plan(self) -> dict[str, str]:
        """Render every file of the project without touching the disk.

        Returns:
            Mapping of project-relative path -> file content.
        """
        files = dict(self.sources.generate())
        files["package.json"] = json.dumps(
            build_package_json(self.features, self.metadata), indent=2
        ) + "\n"
        if self.tests is not None:
            for generated in self.tests.generate_all():
                files[generated.destination] = generated.content
            vitest_config = self.tests.generate_vitest_config()
            if vitest_config:
                files["vitest.config.ts"] = vitest_config
        return files

    async def generate(self, output_dir: str | Path | None = None) -> Path:
        """Generate the project structure.

        Args:
            output_dir: Parent directory where the project folder is created.
                Defaults to ``config.output_dir``.

        Returns:
            Path to the generated project root.

        Raises:
            ProjectExistsError: If the project directory already exists.
        """
        parent = Path(output_dir) if output_dir is not None else self.config.output_dir
        project_root = parent / self.config.project_name
        if project_root.exists():
            raise ProjectExistsError(f"Directory already exists: {project_root}")

        files = self.plan()
        await asyncio.to_thread(project_root.mkdir, parents=True)

        await asyncio.gather(*[
            asyncio.to_thread(write_text_file, project_root / rel, content)
            for rel, content in sorted(files.items())
        ])
        return project_root
