from pathlib import Path
from typing import Dict, Any
from jinja2 import Environment, FileSystemLoader, StrictUndefined

PROFILES = {
    "express-js": "express_js",
    "express-ts": "express_ts",
}


def profile_for(typescript: bool) -> str:
    return "express-ts" if typescript else "express-js"


class TemplateRenderer:
    def __init__(self, templates_root: Path) -> None:
        self.templates_root = Path(templates_root)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_root)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render_structure(self, profile: str, context: Dict[str, Any]) -> Dict[str, str]:
        """Render a profile's template tree into an ordered relative-path -> content mapping."""
        if profile not in PROFILES:
            raise FileNotFoundError(f"Unknown profile '{profile}'")
        template_name = PROFILES[profile]
        src_root = self.templates_root / template_name

        if not src_root.is_dir():
            raise FileNotFoundError(f"Template '{template_name}' not found at {src_root}")

        structure: Dict[str, str] = {}
        for src_path in sorted(src_root.rglob("*")):
            if src_path.is_dir():
                continue
            rel = src_path.relative_to(src_root)

            # Strip .j2 from output filename
            if rel.suffix == ".j2":
                rel = rel.with_suffix("")

            template = self.env.get_template((Path(template_name) / src_path.relative_to(src_root)).as_posix())
            structure[rel.as_posix()] = template.render(**context)
        return structure


def default_renderer() -> TemplateRenderer:
    return TemplateRenderer(Path(__file__).resolve().parents[1] / "templates")
