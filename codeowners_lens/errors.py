from pathlib import Path


class CodeOwnersError(Exception):
    """Base user-facing application error."""


class CodeOwnersFileError(CodeOwnersError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ProjectNotFoundError(CodeOwnersFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Project directory not found")


class InvalidJsonFormatError(CodeOwnersFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(CodeOwnersFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")
