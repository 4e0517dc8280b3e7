from pathlib import Path
from typing import Optional

from codeowners_lens.constants import MODULE_MARKERS, RULE_FILE_PATHS


class FilesHelper:
    def __init__(
        self,
        rule_file_paths: tuple[str, ...] = RULE_FILE_PATHS,
        module_markers: tuple[str, ...] = MODULE_MARKERS,
    ) -> None:
        self.rule_file_paths = tuple(rule_file_paths)
        self.module_markers = tuple(module_markers)

    def find_code_owners_file(self, base_dir_path: str) -> Optional[Path]:
        base_dir = Path(base_dir_path)
        for candidate in self.rule_file_paths:
            rule_path = base_dir / candidate
            if rule_path.exists() and rule_path.is_file():
                return rule_path
        return None

    def get_base_dir(self, project_base_dir: str, file_path: str) -> Optional[str]:
        """Return the nearest module root holding ``file_path`` inside the project."""
        project = Path(project_base_dir)
        path = Path(file_path)
        if project not in path.parents:
            return None

        for directory in path.parents:
            if any((directory / marker).is_file() for marker in self.module_markers):
                return str(directory)
            if directory == project:
                break
        return str(project)
