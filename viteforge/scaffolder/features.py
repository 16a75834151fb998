"""Feature flags and project metadata models.

The models use snake_case attributes with camelCase aliases: Python code
works with ``features.react_router`` while templates see
``features.reactRouter``.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

TestProfileName = Literal["minimum", "standard", "advanced"]
TestType = Literal[
    "unit",
    "redux",
    "router",
    "integration",
    "i18n",
    "accessibility",
    "performance",
    "tailwind",
]


class FeatureFlags(BaseModel):
    """Features selected for the generated application."""

    model_config = ConfigDict(populate_by_name=True)

    typescript: bool = Field(default=True)
    tailwindcss: bool = Field(default=False)
    redux: bool = Field(default=False)
    react_router: bool = Field(default=False, alias="reactRouter")
    i18n: bool = Field(default=False)
    eslint: bool = Field(default=False)
    prettier: bool = Field(default=False)
    husky: bool = Field(default=False)
    github_actions: bool = Field(default=False, alias="githubActions")
    vscode: bool = Field(default=False)
    testing: bool = Field(default=False)
    test_profile: Optional[TestProfileName] = Field(default=None, alias="testProfile")

    def as_context(self) -> dict[str, object]:
        """Flags keyed by their template (camelCase) names."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_names(cls, names: list[str], **extra: object) -> "FeatureFlags":
        """Build flags from a list of enabled flag names (either spelling)."""
        values: dict[str, object] = {name: True for name in names}
        values.update(extra)
        return cls.model_validate(values)


class ProjectMetadata(BaseModel):
    """Descriptive project fields exposed to templates."""

    model_config = ConfigDict(populate_by_name=True)

    project_name: str = Field(default="my-app", alias="projectName")
    author: str = Field(default="")
    description: str = Field(default="")
    license: str = Field(default="MIT")

    def as_context(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class ProfileConfig(BaseModel):
    """Which kinds of tests a profile generates and the coverage it enforces."""

    name: TestProfileName
    description: str
    test_types: tuple[TestType, ...]
    coverage_threshold: int = Field(ge=0, le=100)

    def includes(self, test_type: str) -> bool:
        return test_type in self.test_types


TEST_PROFILES: dict[str, ProfileConfig] = {
    "minimum": ProfileConfig(
        name="minimum",
        description="Smoke tests for the root component",
        test_types=("unit",),
        coverage_threshold=50,
    ),
    "standard": ProfileConfig(
        name="standard",
        description="Unit and integration tests for every selected feature",
        test_types=("unit", "redux", "router", "integration", "i18n"),
        coverage_threshold=70,
    ),
    "advanced": ProfileConfig(
        name="advanced",
        description="Standard plus accessibility, performance and styling tests",
        test_types=(
            "unit",
            "redux",
            "router",
            "integration",
            "i18n",
            "accessibility",
            "performance",
            "tailwind",
        ),
        coverage_threshold=85,
    ),
}


def get_test_profile(name: Optional[str]) -> ProfileConfig:
    """Return the named profile, falling back to ``standard``."""
    return TEST_PROFILES.get(name or "standard", TEST_PROFILES["standard"])
