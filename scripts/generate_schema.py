#!/usr/bin/env python3
"""Generate JSON schema for BadgeSpec, for editors and MCP clients."""

import json
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from badgegen.models import BadgeSpec


def main() -> None:
    """Generate and save the JSON schema for BadgeSpec."""
    schema = BadgeSpec.model_json_schema()

    schema["$schema"] = "http://json-schema.org/draft-07/schema#"
    schema["title"] = "badgegen badge specification"
    schema["description"] = "Inputs accepted by badgegen.render_badge"

    output_path = Path(__file__).parent.parent / "schemas" / "badge.schema.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w") as f:
        json.dump(schema, f, indent=2)

    print(f"Schema generated: {output_path}")


if __name__ == "__main__":
    main()
