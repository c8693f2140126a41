"""Tech-stack detection heuristics for project bootstrap."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from agentcore.bootstrap.models import DetectionResult, StackCategory

logger = logging.getLogger(__name__)


class ManifestReader:
    """Reads well-known manifest files under a project root, caching text."""

    _root: Path
    _cache: dict[str, str | None]

    def __init__(self, root: Path) -> None:
        self._root = root
        self._cache = {}

    def exists(self, name: str) -> bool:
        return (self._root / name).is_file()

    def text(self, name: str) -> str | None:
        if name not in self._cache:
            self._cache[name] = self._read(name)
        return self._cache[name]

    def _read(self, name: str) -> str | None:
        path = self._root / name
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {path}: {e}")
            return None


Predicate = Callable[[ManifestReader], bool]


def contains(manifest: str, pattern: str) -> Predicate:
    """Case-insensitive regex match against a manifest's raw text."""
    compiled = re.compile(pattern, re.IGNORECASE)

    def check(reader: ManifestReader) -> bool:
        text = reader.text(manifest)
        return text is not None and compiled.search(text) is not None

    return check


def exists(*names: str) -> Predicate:
    """True when any of the named files exists."""

    def check(reader: ManifestReader) -> bool:
        return any(reader.exists(name) for name in names)

    return check


def any_of(*predicates: Predicate) -> Predicate:
    def check(reader: ManifestReader) -> bool:
        return any(p(reader) for p in predicates)

    return check


def all_of(*predicates: Predicate) -> Predicate:
    def check(reader: ManifestReader) -> bool:
        return all(p(reader) for p in predicates)

    return check


@dataclass(frozen=True)
class DetectionRule:
    category: StackCategory
    label: str
    persona: str | None
    predicate: Predicate
    # Within a group only the first matching rule fires.
    group: str | None = None


FRONTEND = StackCategory.FRONTEND
BACKEND = StackCategory.BACKEND
DATABASE = StackCategory.DATABASE
MOBILE = StackCategory.MOBILE

DETECTION_RULES: tuple[DetectionRule, ...] = (
    # Frontend framework: one per project, in priority order
    DetectionRule(
        FRONTEND, "Next.js", "frontend-specialist",
        contains("package.json", r'"next"'), group="frontend-framework",
    ),
    DetectionRule(
        FRONTEND, "React", "frontend-specialist",
        contains("package.json", r'"react"'), group="frontend-framework",
    ),
    DetectionRule(
        FRONTEND, "Vue", "frontend-specialist",
        contains("package.json", r'"vue"'), group="frontend-framework",
    ),
    DetectionRule(
        FRONTEND, "Svelte", "frontend-specialist",
        contains("package.json", r'"svelte"'), group="frontend-framework",
    ),
    DetectionRule(
        FRONTEND, "TypeScript", "frontend-specialist",
        any_of(
            contains("package.json", r'"typescript"'),
            all_of(exists("package.json"), exists("tsconfig.json")),
        ),
    ),
    # Node backends
    DetectionRule(BACKEND, "Express", "backend-specialist", contains("package.json", r'"express"')),
    DetectionRule(BACKEND, "Fastify", "backend-specialist", contains("package.json", r'"fastify"')),
    DetectionRule(
        BACKEND, "NestJS", "backend-specialist", contains("package.json", r'"@nestjs/core"')
    ),
    # PHP
    DetectionRule(
        BACKEND, "Laravel", "laravel-specialist",
        contains("composer.json", r'"laravel/framework"'),
    ),
    # Python: framework from requirements.txt, else plain Python
    DetectionRule(
        BACKEND, "FastAPI", "backend-specialist",
        contains("requirements.txt", r"fastapi"), group="python-framework",
    ),
    DetectionRule(
        BACKEND, "Django", "backend-specialist",
        contains("requirements.txt", r"django"), group="python-framework",
    ),
    DetectionRule(
        BACKEND, "Python", "backend-specialist",
        exists("requirements.txt", "pyproject.toml"), group="python-framework",
    ),
    # Go, Rust: presence is enough
    DetectionRule(BACKEND, "Go", "backend-specialist", exists("go.mod")),
    DetectionRule(BACKEND, "Rust", "backend-specialist", exists("Cargo.toml")),
    # ORMs
    DetectionRule(DATABASE, "Prisma", "database-architect", exists("prisma/schema.prisma")),
    DetectionRule(DATABASE, "Drizzle", "database-architect", exists("drizzle.config.ts")),
    # Mobile
    DetectionRule(MOBILE, "Flutter", "mobile-developer", exists("pubspec.yaml")),
    DetectionRule(
        MOBILE, "React Native", "mobile-developer",
        exists("ios/Podfile", "android/build.gradle"),
    ),
)


def detect_tech_stack(
    project_root: Path,
    rules: tuple[DetectionRule, ...] = DETECTION_RULES,
) -> DetectionResult:
    """Evaluate rules in order against manifests in project_root."""
    reader = ManifestReader(project_root)
    result = DetectionResult()
    fired_groups: set[str] = set()

    for rule in rules:
        if rule.group is not None and rule.group in fired_groups:
            continue
        if not rule.predicate(reader):
            continue
        logger.debug(f"Detected {rule.label} ({rule.category}) -> {rule.persona}")
        result.add(rule.category, rule.label, rule.persona)
        if rule.group is not None:
            fired_groups.add(rule.group)

    return result
