"""Template rendering for project scaffolding.

Provides the TemplateRenderer class which renders ``.hbs`` templates from a
template directory with the viteforge template engine.  Supports single-file
rendering, batch tree rendering, and string-based rendering for inline
template content.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional

from ..config import EngineConfig
from ..templating import TemplateEngine
from ..utils import write_text_file


class TemplateRenderer:
    """Renders templates for project scaffolding.

    The renderer discovers template files (``*.hbs`` by default) under the
    engine's template directory.  Templates are rendered with a context
    dictionary that typically contains the feature flags and project
    metadata.
    """

    def __init__(self, engine: Optional[TemplateEngine] = None, config: Optional[EngineConfig] = None) -> None:
        self.engine = engine or TemplateEngine(config=config)

    @property
    def template_dir(self) -> Path:
        return self.engine.templates_dir

    @property
    def extension(self) -> str:
        return self.engine.config.extension

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"store/store.ts.hbs"``).
            context: Variables available inside the template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        return self.engine.process_file(template_path, context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        return self.engine.process(template_string, context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  Returns the output
        path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(write_text_file, out, content)
        return out

    async def render_tree(
        self,
        template_prefix: str,
        output_dir: str | Path,
        context: dict[str, Any],
        *,
        skip_patterns: list[str] | None = None,
    ) -> list[Path]:
        """Render every template under *template_prefix* to *output_dir*.

        The directory structure is preserved and the template extension is
        stripped: ``store/store.ts.hbs`` rendered with
        ``template_prefix="store"`` and ``output_dir="/tmp/app/src/store"``
        writes ``/tmp/app/src/store/store.ts``.  The partials directory is
        never rendered on its own.

        Args:
            template_prefix: Subdirectory inside the template root to scan
                (``""`` for the whole tree).
            output_dir: Target directory where rendered files are written.
            context: Template context variables.
            skip_patterns: Optional list of path substrings to skip.

        Returns:
            List of written file paths.
        """
        skip_patterns = skip_patterns or []
        written: list[Path] = []
        out_base = Path(output_dir)

        for template_key in self.list_templates(template_prefix):
            rel_str = template_key[len(template_prefix):].lstrip("/") if template_prefix else template_key

            if any(pat in rel_str for pat in skip_patterns):
                continue

            output_name = rel_str[: -len(self.extension)]
            path = await self.render_to_file(template_key, out_base / output_name, context)
            written.append(path)

        return written

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of template paths under *prefix*.

        Paths are relative to the template root directory; partials are
        excluded.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        partials_dir = self.engine.config.partials_dir
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob(f"*{self.extension}")
            if p.is_file() and partials_dir not in p.parents
        )
