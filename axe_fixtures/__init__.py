"""axe_fixtures

Test doubles that simulate edge-case behaviours of the axe-core accessibility
engine for integration tests.

Primary entrypoints:
 - legacy.py (engine shim reporting as ``axe-legacy`` without run_partial/finish_run)
 - large_partial.py (partial result with 200,000 duplicate nodes)
 - fixtures.py (named fixture registry)
 - cli.py (Typer CLI)
"""

__all__ = [
    "fixtures",
    "legacy",
    "large_partial",
]
