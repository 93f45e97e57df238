"""Dependency, script and config-file tables for each project flavour."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

CONFIG_FILES_DIR = Path(__file__).parent / "files"

UI_FRAMEWORKS = ("angular", "svelte")


@dataclass(frozen=True)
class ConfigFileEntry:
    """A bundled config file (relative to CONFIG_FILES_DIR) and where it goes in the project."""
    source: str
    target: str


@dataclass(frozen=True)
class ProjectConfig:
    dependencies: Tuple[str, ...]
    scripts: Dict[str, str] = field(default_factory=dict)
    files_copy: Tuple[ConfigFileEntry, ...] = ()
    files_merge: Tuple[ConfigFileEntry, ...] = ()


def _entries(*names, **mapped) -> Tuple[ConfigFileEntry, ...]:
    return tuple(ConfigFileEntry(name, name) for name in names) + tuple(
        ConfigFileEntry(source, target) for source, target in mapped.items()
    )


_FILES_COPY = _entries(
    ".editorconfig",
    ".eslintrc.json",
    ".prettierrc.json",
    "license-config.json",
    "license-header.txt",
    "rollup.config.mjs",
    "tsconfig.json",
)

_FILES_MERGE = (
    ConfigFileEntry("gitignore-target", ".gitignore"),
) + _entries(".claspignore", ".eslintignore", ".prettierignore")

DEFAULT_CONFIG = ProjectConfig(
    dependencies=(
        "@google/clasp@^2.5.0",
        "@rollup/plugin-commonjs@^28.0.9",
        "@rollup/plugin-node-resolve@^16.0.3",
        "@types/google-apps-script@^2.0.7",
        "@typescript-eslint/eslint-plugin@^8.46.2",
        "@vitest/coverage-v8@^4.0.4",
        "eslint@^9.38.0",
        "eslint-config-prettier@^10.1.8",
        "eslint-plugin-prettier@^5.5.4",
        "gts@^6.0.2",
        "license-check-and-add@^4.0.5",
        "ncp@^2.0.0",
        "prettier@^3.6.2",
        "rimraf@^6.0.1",
        "rollup@^4.52.5",
        "rollup-plugin-cleanup@^3.2.1",
        "rollup-plugin-license@^3.6.0",
        "rollup-plugin-typescript2@^0.36.0",
        "typescript@^5.9.3",
        "vitest@^4.0.4",
    ),
    scripts={
        "clean": "rimraf build dist",
        "lint": "npm run license && eslint --fix --no-error-on-unmatched-pattern src/ test/",
        "format": "prettier --write --log-level silent .",
        "bundle": "rollup --no-treeshake -c rollup.config.mjs",
        "build": "npm run clean && npm run bundle && ncp appsscript.json dist/appsscript.json",
        "license": "license-check-and-add add -f license-config.json",
        "test": "npm run lint && npx tsc --noEmit && vitest run",
        "deploy": "npm run license && npm run build && ncp .clasp-dev.json .clasp.json && clasp push -f",
        "deploy:stg": "npm run test && npm run build && ncp .clasp-stg.json .clasp.json && clasp push",
        "deploy:prod": "npm run test && npm run build && ncp .clasp-prod.json .clasp.json && clasp push",
    },
    files_copy=_FILES_COPY,
    files_merge=_FILES_MERGE,
)

_UI_DEPLOY = "npm run build-ui && npm run deploy-ui"

ANGULAR_CONFIG = ProjectConfig(
    dependencies=(
        "@angular/cli",
        "@google/clasp",
        "@types/google-apps-script",
        "@types/jest",
        "@typescript-eslint/eslint-plugin@^5.55.0",
        "eslint@^8.36.0",
        "eslint-config-prettier",
        "eslint-plugin-prettier",
        "fs-extra",
        "gts",
        "jest",
        "license-check-and-add",
        "ncp",
        "prettier",
        "rimraf",
        "rollup",
        "rollup-plugin-cleanup",
        "rollup-plugin-license",
        "rollup-plugin-typescript2",
        "ts-jest",
        "typescript",
    ),
    scripts={
        "preinstall": (
            "test -d src/ui || (cd src/ && ng new --skip-git --skip-tests=true --routing=false"
            " --ssr=false --standalone ui && cd ui/ && ng add --skip-confirmation @angular/material)"
        ),
        "clean": "rimraf build dist",
        "lint": "npm run license && eslint --fix --no-error-on-unmatched-pattern src/ test/",
        "bundle": "rollup --no-treeshake -c rollup.config.mjs",
        "build": "npm run clean && npm run bundle",
        "build-ui": "npm run build --prefix src/ui",
        "license": "license-check-and-add add -f license-config.json",
        "test": "jest test/ --passWithNoTests --detectOpenHandles",
        "test-ui": "npm run test --prefix src/ui",
        "deploy": (
            "npm run lint && npm run test && npm run build && ncp appsscript.json dist/appsscript.json"
            f" && ncp .clasp-dev.json .clasp.json && {_UI_DEPLOY} && clasp push -f"
        ),
        "deploy-ui": "node deploy-ui.mjs",
        "deploy:prod": (
            "npm run lint && npm run test && npm run build && ncp appsscript.json dist/appsscript.json"
            f" && ncp .clasp-prod.json .clasp.json && {_UI_DEPLOY} && clasp push"
        ),
        "serve-ui": "cd src/ui && ng serve",
        "fix-animations": "node fix-animations.mjs",
        "postinstall": "npm run fix-animations && cd src/ui && npm install",
    },
    files_copy=_FILES_COPY + _entries("jest.config.json", "deploy-ui.mjs", "fix-animations.mjs"),
    files_merge=_FILES_MERGE,
)

SVELTE_CONFIG = ProjectConfig(
    dependencies=DEFAULT_CONFIG.dependencies + ("fs-extra@^11.1.0",),
    scripts={
        **DEFAULT_CONFIG.scripts,
        "preinstall": "node setup-svelte.mjs",
        "build-ui": "npm run build --prefix src/ui",
        "deploy-ui": "node deploy-ui.mjs src/ui/dist",
        "deploy": (
            "npm run license && npm run build && ncp appsscript.json dist/appsscript.json"
            f" && ncp .clasp-dev.json .clasp.json && {_UI_DEPLOY} && clasp push -f"
        ),
        "deploy:prod": (
            "npm run test && npm run build && ncp appsscript.json dist/appsscript.json"
            f" && ncp .clasp-prod.json .clasp.json && {_UI_DEPLOY} && clasp push"
        ),
        "serve-ui": "cd src/ui && npm run dev",
        "postinstall": "cd src/ui && npm install",
    },
    files_copy=_FILES_COPY + _entries("deploy-ui.mjs", "setup-svelte.mjs"),
    files_merge=_FILES_MERGE,
)

_CONFIGS = {
    None: DEFAULT_CONFIG,
    "angular": ANGULAR_CONFIG,
    "svelte": SVELTE_CONFIG,
}


def config_for(ui_framework: Optional[str]) -> ProjectConfig:
    """Return the table for a UI framework name, or the default table for None."""
    try:
        return _CONFIGS[ui_framework]
    except KeyError:
        raise ValueError(f"Unknown UI framework: {ui_framework}") from None
