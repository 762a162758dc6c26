"""Typer CLI for inspecting and exporting the fixtures."""
from collections import Counter
from pathlib import Path

import orjson
import typer
from dotenv import load_dotenv

from .config import ConfigError, load_config
from .fixtures import FIXTURES

# loading AXE_FIXTURES_CONFIG (and friends) from a .env file
load_dotenv()

app = typer.Typer(add_completion=False)

CONFIG_OPTION = typer.Option(None, envvar="AXE_FIXTURES_CONFIG", help="Fixture config YAML")


@app.command("list")
def list_fixtures(config: str = CONFIG_OPTION):
    """List the registered fixtures."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    for name in sorted(FIXTURES):
        typer.echo(name)
    typer.echo(f"legacy engine name: {cfg.legacy_engine_name}")
    typer.echo(f"removed entry points: {', '.join(cfg.removed_entry_points)}")


@app.command("inspect")
def inspect_partial():
    """Summarize the bulk partial result."""
    from .large_partial import PARTIAL_RESULT

    env = PARTIAL_RESULT["environmentData"]
    engine = env["testEngine"]
    typer.echo(f"engine: {engine['name']} {engine['version']}")
    typer.echo(f"runner: {env['testRunner']['name']}")
    typer.echo(f"url: {env['url']}")
    typer.echo(f"timestamp: {env['timestamp']}")
    typer.echo(f"frames: {len(PARTIAL_RESULT['frames'])}")
    for rule in PARTIAL_RESULT["results"]:
        selectors = Counter(tuple(n["node"]["selector"]) for n in rule["nodes"])
        typer.echo(
            f"rule {rule['id']} ({rule['result']}, {rule['impact']}): "
            f"{len(rule['nodes'])} nodes, {len(selectors)} distinct selector(s)"
        )


@app.command()
def dump(out: str = typer.Argument(..., help="Output JSON path"), indent: bool = typer.Option(False, help="Pretty-print the JSON.")):
    """Write the bulk partial result as JSON for non-Python harnesses."""
    from .large_partial import PARTIAL_RESULT

    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    option = orjson.OPT_INDENT_2 if indent else 0
    out_path.write_bytes(orjson.dumps(PARTIAL_RESULT, option=option))
    typer.echo(f"Wrote {out_path}")


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
