"""Optional per-project configuration."""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from codeowners_lens.constants import CONFIG_FILENAME, MODULE_MARKERS, RULE_FILE_PATHS
from codeowners_lens.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from codeowners_lens.files import FilesHelper
from codeowners_lens.utils import read_json_safe

CONFIG_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "rule_file_paths": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "minItems": 1,
        },
        "module_markers": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class LensConfig:
    rule_file_paths: tuple[str, ...] = RULE_FILE_PATHS
    module_markers: tuple[str, ...] = MODULE_MARKERS

    def files_helper(self) -> FilesHelper:
        return FilesHelper(
            rule_file_paths=self.rule_file_paths,
            module_markers=self.module_markers,
        )


def _schema_error_message(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


@lru_cache(maxsize=1)
def _config_validator() -> Draft202012Validator:
    return Draft202012Validator(CONFIG_SCHEMA)


def validate_config(payload: Any, config_path: Path) -> None:
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(config_path, "must be a JSON object")
    error = next(iter(_config_validator().iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(config_path, _schema_error_message(error))


def load_config(project_dir: Path) -> LensConfig:
    config_path = project_dir / CONFIG_FILENAME
    payload, error = read_json_safe(config_path)
    if error is not None:
        raise InvalidJsonFormatError(config_path, error)
    if payload is None:
        return LensConfig()

    validate_config(payload, config_path)
    return LensConfig(
        rule_file_paths=tuple(payload.get("rule_file_paths", RULE_FILE_PATHS)),
        module_markers=tuple(payload.get("module_markers", MODULE_MARKERS)),
    )
