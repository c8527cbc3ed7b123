import json
from pathlib import Path
from typing import Any

from jsondiffreport.log import log


def load_document(path: str) -> Any:
    """Read ``path`` as UTF-8 and parse it as JSON.

    Raises OSError when the file cannot be read and ValueError
    (JSONDecodeError / UnicodeDecodeError) when it is not valid JSON.
    """
    text = Path(path).read_text(encoding="utf-8")
    doc = json.loads(text)
    log.debug(f"Loaded {path} ({len(text)} bytes, {type(doc).__name__})")
    return doc
