"""
Keeps the last analysis on local disk so a later run restores it.
Every change is mirrored to one JSON file; clearing removes it together with
the session cache directory.
"""
import json
import os
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

from Analyzer.Model.AnalysisSnapshot import AnalysisSnapshot

import logging
logger = logging.getLogger(__name__)

SNAPSHOT_FILE = "repoAnalysis.json"
SESSION_DIR = "session"


def default_state_dir() -> Path:
    return Path(os.environ.get("ANALYZER_STATE_DIR") or Path.home() / ".repo-analyzer")


class SnapshotStore:
    def __init__(self, state_dir: Optional[Path] = None):
        self.state_dir = Path(state_dir) if state_dir else default_state_dir()
        self.path = self.state_dir / SNAPSHOT_FILE
        self.session_dir = self.state_dir / SESSION_DIR
        self.snapshot = self.load()

    def load(self) -> AnalysisSnapshot:
        if not self.path.exists():
            return AnalysisSnapshot()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("snapshot is not an object")
            return AnalysisSnapshot.from_dict(data)
        except (OSError, ValueError) as e:
            logger.error("Error parsing saved repo analysis: %s", e)
            return AnalysisSnapshot()

    def _persist(self) -> None:
        # nothing is written until a URL has been analyzed
        if not self.snapshot.repo_url:
            return
        self.state_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self.snapshot.to_dict(), f, indent=2)
        os.replace(tmp_path, self.path)

    def set_repo_url(self, url: str) -> None:
        self.snapshot.repo_url = url
        self._persist()

    def set_repo_info(self, info: Optional[Dict[str, Any]]) -> None:
        self.snapshot.repo_info = info
        self._persist()

    def set_languages(self, languages: Dict[str, int]) -> None:
        self.snapshot.languages = languages or {}
        self._persist()

    def set_technologies(self, technologies: Optional[Dict[str, Any]]) -> None:
        self.snapshot.technologies = technologies
        self._persist()

    def clear(self) -> None:
        self.snapshot = AnalysisSnapshot()
        if self.path.exists():
            self.path.unlink()
        if self.session_dir.exists():
            shutil.rmtree(self.session_dir)

    def write_session(self, name: str, data: Any) -> Path:
        self.session_dir.mkdir(parents=True, exist_ok=True)
        path = self.session_dir / f"{name}.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        return path

    def read_session(self, name: str) -> Optional[Any]:
        path = self.session_dir / f"{name}.json"
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session entry %s: %s", path, e)
            return None
