from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from jsondiffreport.classifier import TopLevelStats
from jsondiffreport.log import log

JSONDIFFPATCH_URL = "https://esm.sh/jsondiffpatch@0.6.0"
TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
NO_DIFF = "No diff"


def create_env(template_dir: str = TEMPLATE_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html"]),
    )
    # Keep document key order in the embedded JSON
    env.policies["json.dumps_kwargs"] = {"sort_keys": False}
    return env


def render_report(
    delta: Optional[Any],
    left: Any,
    stats: TopLevelStats,
    title: str = "JSON Diff Report",
    env: Optional[Environment] = None,
) -> str:
    """Assemble the standalone HTML report.

    The diff body is drawn in the browser by the jsondiffpatch HTML
    formatter from the embedded delta and left document. Key names in the
    summary are HTML-escaped.
    """
    env = env or create_env()
    template = env.get_template("report.html")
    html = template.render(
        title=title,
        package_url=JSONDIFFPATCH_URL,
        stats=stats,
        has_delta=delta is not None,
        delta=delta,
        left=left,
        placeholder=NO_DIFF,
    )
    log.debug(
        f"Rendered report: added={len(stats.added)} removed={len(stats.removed)} "
        f"updated={len(stats.updated)}"
    )
    return html


def write_report(html: str, out_path: str) -> Path:
    path = Path(out_path)
    path.write_text(html, encoding="utf-8")
    log.info(f"Wrote {len(html)} characters to {path}")
    return path
