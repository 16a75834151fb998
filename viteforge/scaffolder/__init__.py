"""viteforge scaffolder -- generates React + Vite project structures.

This module takes the selected ``FeatureFlags`` and a ``ScaffoldConfig`` and
renders the project's source files, test files and ``package.json`` through
the template engine.

Quick usage::

    from viteforge.config import ScaffoldConfig
    from viteforge.scaffolder import FeatureFlags, ProjectGenerator

    config = ScaffoldConfig(project_name="my-app")
    features = FeatureFlags(redux=True, testing=True, test_profile="standard")
    generator = ProjectGenerator(config, features)
    project_path = await generator.generate("/tmp/output")
"""

from viteforge.scaffolder.features import FeatureFlags, ProjectMetadata
from viteforge.scaffolder.generator import ProjectExistsError, ProjectGenerator
from viteforge.scaffolder.renderer import TemplateRenderer
from viteforge.scaffolder.sources import SourceFileGenerator
from viteforge.scaffolder.test_gen import TestGenerator

__all__ = [
    "FeatureFlags",
    "ProjectExistsError",
    "ProjectGenerator",
    "ProjectMetadata",
    "SourceFileGenerator",
    "TemplateRenderer",
    "TestGenerator",
]
