from typing import Final


CODEOWNERS_FILENAME: Final[str] = "CODEOWNERS"
CONFIG_FILENAME: Final[str] = ".codeowners-lens.json"

RULE_FILE_PATHS: Final[tuple[str, ...]] = (
    CODEOWNERS_FILENAME,
    f"docs/{CODEOWNERS_FILENAME}",
    f".github/{CODEOWNERS_FILENAME}",
)

MODULE_MARKERS: Final[tuple[str, ...]] = (
    "pyproject.toml",
    "setup.py",
    "package.json",
    "go.mod",
    "Cargo.toml",
    "pom.xml",
    "build.gradle",
    "build.gradle.kts",
)

EMPTY_OWNER: Final[str] = "¯\\_(ツ)_/¯"
NO_RULE_FILE_LABEL: Final[str] = "No CODEOWNERS file"
