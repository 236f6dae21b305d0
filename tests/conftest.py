from __future__ import annotations

import sys
from pathlib import Path


def _ensure_repo_root_first() -> Path:
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str in sys.path:
        sys.path.remove(repo_root_str)
    sys.path.insert(0, repo_root_str)
    return repo_root


def _evict_jsnail_if_from_other_checkout(repo_root: Path) -> None:
    expected = str(repo_root / "jsnail")
    pkg = sys.modules.get("jsnail")
    if pkg is None:
        return

    pkg_paths = getattr(pkg, "__path__", None)
    if not pkg_paths or any(str(p).startswith(expected) for p in pkg_paths):
        return

    for name in list(sys.modules.keys()):
        if name == "jsnail" or name.startswith("jsnail."):
            sys.modules.pop(name, None)


def pytest_sessionstart(session) -> None:  # noqa: ARG001
    repo_root = _ensure_repo_root_first()
    _evict_jsnail_if_from_other_checkout(repo_root)
