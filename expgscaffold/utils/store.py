from typing import Dict, Any, List
from uuid import uuid4

class InMemoryStore:
    def __init__(self):
        self.catalog: List[Dict[str, Any]] = [
            {"id": "express-js", "name": "Express + PostgreSQL (JavaScript)", "kind": "profile"},
            {"id": "express-ts", "name": "Express + PostgreSQL (TypeScript)", "kind": "profile"},
        ]
        self.runs: Dict[str, Dict[str, Any]] = {}

    def list_catalog(self):
        return self.catalog

    def record_run(self, name: str, report: Dict[str, Any]) -> Dict[str, Any]:
        rid = str(uuid4())
        run = {"id": rid, "name": name, **report}
        self.runs[rid] = run
        return run

    def list_runs(self):
        return list(self.runs.values())
