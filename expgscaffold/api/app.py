from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from pathlib import Path
from ..generator.orchestrator import run_scaffold
from ..generator.prompts import Answers
from ..generator.renderer import PROFILES
from ..utils.store import InMemoryStore

app = FastAPI(title="create-expg-server API", version="0.1.0")
db = InMemoryStore()

class ScaffoldReq(BaseModel):
    profile: str = "express-js"
    out: str
    name: str
    author: str = ""
    repo_url: str = ""

@app.get("/catalog")
def catalog():
    return {"items": db.list_catalog()}

@app.get("/runs")
def list_runs():
    return {"items": db.list_runs()}

@app.post("/scaffold")
def scaffold(req: ScaffoldReq):
    if req.profile not in PROFILES:
        raise HTTPException(status_code=404, detail="profile not found")
    answers = Answers(
        project_name=req.name,
        author_name=req.author,
        has_remote=bool(req.repo_url),
        repo_url=req.repo_url,
        typescript=req.profile == "express-ts",
    )
    out_dir = Path(req.out).resolve()
    try:
        report = run_scaffold(answers, out_dir, git=False, install=False)
    except OSError as e:
        raise HTTPException(status_code=400, detail=str(e))
    run = db.record_run(req.name, report.as_dict())
    return {"status": "ok", "out": str(report.target), "run": run}
