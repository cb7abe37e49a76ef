"""Core transcoding engine: IR, tokenizer, resolver, line shapes, validator.

WHY: The core package is the pure heart of the tool — every host (CLI,
HTTP API, editor glue) goes through transcoder.py and nothing here
touches files, sockets or global state.

HOW: ir.py defines the data structures, tokenizer.py splits text,
resolver.py fills per-tag records, lines.py recognizes call and
directive lines, validator.py checks type paths, and transcoder.py
exposes the public entry points.

RULES:
- No I/O and no mutable module state in this package
- Entry points return None or an empty list instead of raising
"""
