from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from ..services.models import ChartSpec


class ArtifactWriter:
    """Write a rendered chart and its inputs to a fresh run directory."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def persist(
        self,
        spec: ChartSpec,
        config: str,
        html: str,
        run_inputs: Dict[str, Any],
    ) -> Path:
        run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        run_dir = self.root / run_id
        run_dir.mkdir(parents=True, exist_ok=False)

        self._write_json(run_dir / "inputs.json", run_inputs)
        self._write_json(run_dir / "spec.json", spec.to_public_dict())
        (run_dir / "chart.js").write_text(config, encoding="utf-8")
        (run_dir / "chart.html").write_text(html, encoding="utf-8")
        return run_dir

    def _write_json(self, path: Path, data: Any) -> None:
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2, default=str), encoding="utf-8")
