"""Application source files rendered from the dynamic templates.

Each entry of :data:`SOURCE_FILES` names a template, the path the rendered
file is written to inside the project, and the feature flag (if any) that
must be enabled for the file to be generated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..templating import TemplateEngine, create_template_context
from ..utils import print_warning
from .features import FeatureFlags, ProjectMetadata

LOCALES: tuple[str, ...] = ("en", "pt", "es")


@dataclass(frozen=True)
class SourceFile:
    template: str
    destination: str
    requires: Optional[str] = None
    # Copied verbatim instead of rendered.
    raw: bool = False


SOURCE_FILES: tuple[SourceFile, ...] = (
    SourceFile("main.tsx.hbs", "src/main.tsx"),
    SourceFile("App.tsx.hbs", "src/App.tsx"),
    SourceFile("App.css.hbs", "src/App.css"),
    SourceFile("vite.config.ts.hbs", "vite.config.ts"),
    SourceFile("store/store.ts.hbs", "src/store/store.ts", requires="redux"),
    SourceFile("store/slices/appSlice.ts.hbs", "src/store/slices/appSlice.ts", requires="redux"),
    SourceFile("i18n/config.ts.hbs", "src/i18n/config.ts", requires="i18n"),
    *(
        SourceFile(f"i18n/locales/{locale}.json.hbs", f"src/i18n/locales/{locale}.json", requires="i18n", raw=True)
        for locale in LOCALES
    ),
    SourceFile("POSSIBILITIES.md.hbs", "POSSIBILITIES.md"),
)


class SourceFileGenerator:
    """Renders the application source files for a set of features.

    Args:
        features: Selected feature flags.
        metadata: Project name, author, description and license.
        engine: Engine to render with; one using the bundled templates is
            created when omitted.
        package_manager: Package manager named in the generated docs.
    """

    def __init__(
        self,
        features: FeatureFlags,
        metadata: Optional[ProjectMetadata] = None,
        engine: Optional[TemplateEngine] = None,
        package_manager: str = "npm",
    ) -> None:
        self.features = features
        self.metadata = metadata or ProjectMetadata()
        self.engine = engine or TemplateEngine()
        self.package_manager = package_manager

    def build_context(self) -> dict[str, Any]:
        """Render context for the source templates."""
        return create_template_context(self.features, {
            **self.metadata.as_context(),
            "packageManager": self.package_manager,
        })

    def planned_files(self) -> list[SourceFile]:
        """Source files that apply to the enabled features."""
        flags = self.features.as_context()
        return [f for f in SOURCE_FILES if f.requires is None or flags.get(f.requires)]

    def generate(self) -> dict[str, str]:
        """Render every applicable source file.

        Returns:
            Mapping of project-relative destination path -> file content.
            Templates that do not exist are skipped with a warning.
        """
        context = self.build_context()
        contents: dict[str, str] = {}

        for source in self.planned_files():
            if not self.engine.template_exists(source.template):
                print_warning(f"Template {source.template} not found, skipping {source.destination}")
                continue
            if source.raw:
                path = self.engine.templates_dir / source.template
                contents[source.destination] = path.read_text(encoding="utf-8")
            else:
                contents[source.destination] = self.engine.process_file(source.template, context)

        return contents
