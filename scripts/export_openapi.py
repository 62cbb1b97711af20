#!/usr/bin/env python3
"""
Write the OpenAPI document of the Dog Breeds API to a JSON file.

External tools (client generators, contract tests, API gateways) can consume
the file without running the server.

Usage:
  python scripts/export_openapi.py [--output openapi.json]
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dog_breeds.interfaces.http.main import create_app


def export_openapi(output: Path) -> Path:
    app = create_app()
    document = app.openapi()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(document, indent=2), encoding="utf-8")
    return output


def main() -> int:
    parser = argparse.ArgumentParser(description="Export the OpenAPI document to JSON")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("openapi.json"),
        help="Destination file (default: openapi.json)",
    )
    args = parser.parse_args()
    path = export_openapi(args.output)
    print(f"✅ OpenAPI document written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
