import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_codeowners():
    def _write(base_dir: Path, text: str, relative: str = "CODEOWNERS") -> Path:
        path = base_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def service():
    from codeowners_lens.files import FilesHelper
    from codeowners_lens.globs.matcher import GlobMatcher
    from codeowners_lens.service import CodeOwnerService

    return CodeOwnerService(GlobMatcher(), FilesHelper())


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
