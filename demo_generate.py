#!/usr/bin/env python3
"""
Complete Pipeline Demo: schema document → descriptors → Python dataclasses

Shows the full workflow:
1. Load a JSON schema document (or the built-in "Default" example)
2. Build property descriptors (types + defaults)
3. Generate a Python module of dataclasses
"""

import sys

from schemagen.backends import generate_module, save_module_file
from schemagen.descriptors import build_descriptors
from schemagen.examples import build_default_schema
from schemagen.serialization import schema_from_file


def main():
    if len(sys.argv) > 1:
        schema = schema_from_file(sys.argv[1])
        name = "Root"
    else:
        schema = build_default_schema()
        name = "Default"

    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: Schema → Descriptors → Dataclasses")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Build descriptors
    # =========================================================================
    print("\n1. BUILDING DESCRIPTORS...")
    result = build_descriptors(schema, name=name)
    print(f"   ✓ Types: {list(result.types)}")
    print(f"   ✓ Enums: {list(result.enums)}")

    for prop in result.root.properties:
        print(f"      {prop.name:<28} {str(prop.target_type):<32} {prop.default!r}")

    # =========================================================================
    # STEP 2: Generate module
    # =========================================================================
    print("\n2. GENERATING MODULE...")
    filename = f"{name.lower()}_model.py"
    save_module_file(result, filename)
    print(f"   ✓ Saved {filename}")

    print("\n3. SAMPLE OUTPUT:")
    print("-" * 80)
    for line in generate_module(result).split('\n')[:30]:
        print(line)


if __name__ == "__main__":
    main()
