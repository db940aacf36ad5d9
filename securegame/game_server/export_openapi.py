#!/usr/bin/env python3
"""Export OpenAPI schema from the FastAPI application."""

import argparse
import json
import sys
from pathlib import Path

import yaml

from securegame.game_server.main import app


def export_openapi(output_file: str = "openapi.json", format: str = "json") -> None:
    """
    Export the OpenAPI schema to a file.

    Args:
        output_file: Output file path
        format: Output format (json or yaml)
    """
    if format not in ("json", "yaml"):
        print(f"ERROR: Unsupported format '{format}'. Use 'json' or 'yaml'.")
        sys.exit(1)

    schema = app.openapi()
    output_path = Path(output_file)

    with output_path.open("w") as f:
        if format == "json":
            json.dump(schema, f, indent=2)
        else:
            yaml.dump(schema, f, default_flow_style=False, sort_keys=False)
    print(f"✓ OpenAPI schema exported to {output_path} ({format.upper()})")

    print("\nOpenAPI Info:")
    print(f"  Title: {schema['info']['title']}")
    print(f"  Version: {schema['info']['version']}")
    print(f"  Endpoints: {len(schema['paths'])}")
    print("\nEndpoints:")
    for path, methods in schema["paths"].items():
        for method in methods.keys():
            if method != "parameters":
                print(f"  {method.upper():6} {path}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Export OpenAPI schema")
    parser.add_argument(
        "-o",
        "--output",
        default="openapi.json",
        help="Output file path (default: openapi.json)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )

    args = parser.parse_args(argv)
    export_openapi(args.output, args.format)


if __name__ == "__main__":
    main()
