"""Command-line interface.

Examples::

    viteforge render App.tsx.hbs --set features.redux=true --set projectName=demo
    viteforge render templates/ -o out/ --context context.json
    viteforge lint templates/
    viteforge new my-app --feature redux --feature reactRouter --test-profile standard
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from .config import DEFAULT_TEMPLATES_DIR, EngineConfig, ScaffoldConfig
from .scaffolder import FeatureFlags, ProjectGenerator, TemplateRenderer
from .scaffolder.features import TEST_PROFILES
from .templating import TemplateEngine, TemplateError, lint_directory
from .utils import (
    console,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Context helpers
# ---------------------------------------------------------------------------


def parse_value(raw: str) -> Any:
    """Interpret a ``--set`` value: JSON when it parses, otherwise a string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def apply_assignment(context: dict[str, Any], assignment: str) -> None:
    """Apply ``dotted.key=value`` to *context*, creating nested mappings."""
    if "=" not in assignment:
        raise ValueError(f"Expected KEY=VALUE, got: {assignment}")
    key, raw = assignment.split("=", 1)
    parts = [p for p in key.strip().split(".") if p]
    if not parts:
        raise ValueError(f"Empty key in assignment: {assignment}")

    target = context
    for part in parts[:-1]:
        child = target.get(part)
        if not isinstance(child, dict):
            child = {}
            target[part] = child
        target = child
    target[parts[-1]] = parse_value(raw)


def load_context(path: str | None, assignments: list[str]) -> dict[str, Any]:
    context: dict[str, Any] = {}
    if path:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Context file must hold a JSON object: {path}")
        context.update(data)
    context.setdefault("features", {})
    for assignment in assignments:
        apply_assignment(context, assignment)
    return context


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_render(args: argparse.Namespace) -> int:
    target = Path(args.template)
    context = load_context(args.context, args.set or [])

    if target.is_dir():
        if not args.output:
            print_error("Rendering a directory requires --output")
            return 1
        renderer = TemplateRenderer(config=EngineConfig(templates_dir=target, verbose=args.verbose))
        written = asyncio.run(renderer.render_tree("", args.output, context))
        print_success(f"Rendered {len(written)} template(s) into {args.output}")
        return 0

    templates_dir = Path(args.templates_dir) if args.templates_dir else target.parent
    engine = TemplateEngine(config=EngineConfig(templates_dir=templates_dir, verbose=args.verbose))
    output = engine.process_file(target.resolve(), context)

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(output, encoding="utf-8")
        print_success(f"Wrote {out}")
    else:
        sys.stdout.write(output)
    return 0


def cmd_lint(args: argparse.Namespace) -> int:
    directory = Path(args.directory)
    if not directory.is_dir():
        print_error(f"Not a directory: {directory}")
        return 1

    issues = lint_directory(directory, args.extension)
    if not issues:
        print_success(f"No template issues found in {directory}")
        return 0

    for issue in issues:
        print_warning(str(issue))
    console.print(f"[bold red]{len(issues)} issue(s) found.[/bold red]")
    return 1


def cmd_new(args: argparse.Namespace) -> int:
    known = set(FeatureFlags.model_fields)
    known |= {f.alias for f in FeatureFlags.model_fields.values() if f.alias}
    unknown = [name for name in args.feature if name not in known]
    if unknown:
        print_error(f"Unknown feature flag(s): {', '.join(unknown)}")
        return 1

    extra: dict[str, Any] = {}
    if args.test_profile:
        extra["testing"] = True
        extra["testProfile"] = args.test_profile
    features = FeatureFlags.from_names(args.feature, **extra)

    config = ScaffoldConfig(
        project_name=args.name,
        author=args.author,
        description=args.description,
        license=args.license,
        output_dir=Path(args.output),
        package_manager=args.package_manager,
    )
    config.engine.verbose = args.verbose

    project_root = asyncio.run(ProjectGenerator(config, features).generate())

    enabled = [name for name, value in features.as_context().items() if value is True]
    print_summary_table(
        {
            "Project": config.project_name,
            "Location": str(project_root),
            "Features": ", ".join(enabled) or "-",
            "Package manager": config.package_manager,
        },
        title="Project created",
    )
    print_info(f"Next: cd {project_root} && {config.package_manager} install")
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="viteforge",
        description="viteforge -- feature-driven React + Vite scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Report recovered template problems")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a template file or directory")
    render.add_argument("template", help="Template file, or directory of templates")
    render.add_argument("--context", "-c", help="JSON file with the render context")
    render.add_argument(
        "--set", "-s", action="append", metavar="KEY=VALUE",
        help="Set a context value (dotted keys, JSON values), repeatable",
    )
    render.add_argument("--templates-dir", help="Template root used for partials (default: the template's folder)")
    render.add_argument("--output", "-o", help="Output file (or directory when rendering a directory)")
    render.set_defaults(handler=cmd_render)

    lint = sub.add_parser("lint", help="Check templates for common mistakes")
    lint.add_argument("directory", nargs="?", default=str(DEFAULT_TEMPLATES_DIR))
    lint.add_argument("--extension", default=".hbs")
    lint.set_defaults(handler=cmd_lint)

    new = sub.add_parser("new", help="Scaffold a new project")
    new.add_argument("name", help="Project name")
    new.add_argument("--output", "-o", default=".", help="Parent directory (default: .)")
    new.add_argument("--feature", "-f", action="append", default=[], help="Enable a feature flag, repeatable")
    new.add_argument("--test-profile", choices=sorted(TEST_PROFILES), default=None)
    new.add_argument("--package-manager", choices=["npm", "yarn", "pnpm", "bun"], default="npm")
    new.add_argument("--author", default="")
    new.add_argument("--description", default="")
    new.add_argument("--license", default="MIT")
    new.set_defaults(handler=cmd_new)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``viteforge`` / ``python -m viteforge.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        code = args.handler(args)
    except (TemplateError, OSError, ValueError) as exc:
        print_error(f"Error: {exc}")
        code = 1

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
