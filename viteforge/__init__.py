"""viteforge -- feature-driven React + Vite project scaffolding."""

__version__ = "0.1.0"
