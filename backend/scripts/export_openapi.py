"""
Write the generated OpenAPI document to docs/swagger.json.

Point SWAGGER_FILE at the output to serve a frozen copy at /swagger:
- backend/: `python scripts/export_openapi.py [output-path]`
"""

import json
import sys
from pathlib import Path

# Allow running from repo root by ensuring `backend/` is on sys.path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from main import app

DEFAULT_OUTPUT = BACKEND_DIR / "docs" / "swagger.json"


def export(output: Path) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(app.openapi(), indent=2), encoding="utf-8")
    return output


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT
    print(f"[export_openapi] wrote {export(target)}")
