"""
CLI entry point for the jam-nodes playground.

    jam-playground list
    jam-playground run search_contacts --mock --example
    jam-playground credentials set apollo
    jam-playground serve --port 3210
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import click

from jam_core.config import PlaygroundConfig
from jam_core.node import NodeCategory, NodeDefinition
from jam_core.observability import configure_logging
from jam_core.schema import build_example_input, derive_fields
from jam_nodes import CREDENTIAL_SPECS, __version__
from jam_playground.prompts import prompt_for_credentials, prompt_for_input
from jam_playground.runner import Playground, UnknownNodeError
from jam_playground.web import PlaygroundServer, PlaygroundServerConfig

CATEGORY_TITLES = {
    NodeCategory.LOGIC: "Logic",
    NodeCategory.TRANSFORM: "Transform",
    NodeCategory.INTEGRATION: "Integrations",
    NodeCategory.ACTION: "AI Actions",
}


def _playground(ctx: click.Context) -> Playground:
    return ctx.obj


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2, default=str)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show execution details")
@click.option("--debug", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool):
    """jam-nodes playground - browse, configure and run workflow nodes."""
    config = ctx.obj.config if isinstance(ctx.obj, Playground) else PlaygroundConfig()
    level = "DEBUG" if debug else "INFO" if verbose else config.log_level
    configure_logging(level=level, format=config.log_format)
    if not isinstance(ctx.obj, Playground):
        ctx.obj = Playground(config=config)


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@cli.command("list")
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in NodeCategory]),
    help="Only show nodes in this category",
)
@click.option("--json", "as_json", is_flag=True, help="Output node metadata as JSON")
@click.pass_context
def list_nodes(ctx: click.Context, category: str | None, as_json: bool):
    """List available nodes."""
    registry = _playground(ctx).registry
    definitions = registry.get_by_category(category) if category else registry.get_all()

    if as_json:
        click.echo(_dump([d.metadata().model_dump(mode="json") for d in definitions]))
        return

    for node_category in NodeCategory:
        group = [d for d in definitions if d.category == node_category]
        if not group:
            continue
        click.secho(f"\n{CATEGORY_TITLES[node_category]}", bold=True)
        for definition in group:
            click.echo(f"  {definition.name} ({definition.type})")
            click.echo(f"    {definition.description}")
            capabilities = definition.capabilities.enabled()
            if capabilities:
                click.echo(f"    Capabilities: {', '.join(capabilities)}")
    click.echo(f"\n{len(definitions)} node(s)")


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


def _parse_vars(pairs: tuple[str, ...]) -> dict[str, Any]:
    variables: dict[str, Any] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint="--var")
        key, raw = pair.split("=", 1)
        try:
            variables[key.strip()] = json.loads(raw)
        except json.JSONDecodeError:
            variables[key.strip()] = raw
    return variables


def _select_node(playground: Playground) -> NodeDefinition:
    definitions = playground.registry.get_all()
    for index, definition in enumerate(definitions, start=1):
        click.echo(f"  {index:2}. {definition.name} ({definition.type}) [{definition.category.value}]")
    choice = click.prompt("Select a node", type=click.IntRange(1, len(definitions)))
    return definitions[choice - 1]


def _resolve_input(definition: NodeDefinition, input_json: str | None, example: bool) -> Any:
    if input_json is not None:
        try:
            return json.loads(input_json)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"not valid JSON: {e}", param_hint="--input") from e
    if example:
        return build_example_input(definition.input_schema)
    click.echo(f"\nInput for {definition.name}:")
    return prompt_for_input(derive_fields(definition.input_schema))


def _collect_credentials(playground: Playground, node_type: str) -> dict[str, dict[str, str]]:
    """Prompt for any missing credentials the node needs, optionally saving them."""
    entered: dict[str, dict[str, str]] = {}
    manager = playground.credential_manager()
    for service, spec in manager.get_missing_for_node_types([node_type]):
        values = prompt_for_credentials(spec)
        entered[service] = values
        if click.confirm(f"Save {spec.title} credentials for future runs?", default=True):
            playground.store.save(service, values)
    return entered


@cli.command()
@click.argument("node_type", required=False)
@click.option("--input", "-i", "input_json", help="Node input as a JSON object")
@click.option("--example", is_flag=True, help="Use a generated example input")
@click.option("--mock", is_flag=True, help="Return mock output instead of calling services")
@click.option("--no-confirm", is_flag=True, help="Run without asking for confirmation")
@click.option("--var", "var_pairs", multiple=True, help="Workflow variable as KEY=VALUE (repeatable)")
@click.pass_context
def run(
    ctx: click.Context,
    node_type: str | None,
    input_json: str | None,
    example: bool,
    mock: bool,
    no_confirm: bool,
    var_pairs: tuple[str, ...],
):
    """Run a single node and print its result."""
    playground = _playground(ctx)
    variables = _parse_vars(var_pairs)

    if node_type is None:
        definition = _select_node(playground)
    else:
        try:
            definition = playground.get_node(node_type)
        except UnknownNodeError as e:
            raise click.ClickException(str(e)) from e

    credentials = {} if mock else _collect_credentials(playground, definition.type)
    raw_input = _resolve_input(definition, input_json, example)

    if not no_confirm:
        click.echo(f"\nInput:\n{_dump(raw_input)}")
        click.confirm(f"Run {definition.name}{' (mock)' if mock else ''}?", default=True, abort=True)

    result = asyncio.run(
        playground.execute(
            definition.type,
            raw_input,
            credentials=credentials,
            variables=variables,
            mock=mock,
        )
    )

    click.echo(_dump(result.to_dict()))
    sys.exit(0 if result.success else 1)


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


def render_env_template() -> str:
    lines = ["# jam-nodes credentials", "# Fill in the services you use; leave the rest empty.", ""]
    for spec in CREDENTIAL_SPECS.values():
        lines.append(f"# {spec.title}: {', '.join(spec.node_types)}")
        if spec.help_url:
            lines.append(f"# {spec.help_url}")
        for cred_field in spec.fields:
            lines.append(f"{cred_field.env_var}=")
        lines.append("")
    return "\n".join(lines)


@cli.command()
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.option(
    "--path",
    "env_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path(".env"),
    show_default=True,
    help="Where to write the template",
)
def init(force: bool, env_path: Path):
    """Write a .env template listing every credential variable."""
    if env_path.exists() and not force:
        raise click.ClickException(f"{env_path} already exists (use --force to overwrite)")
    env_path.write_text(render_env_template(), encoding="utf-8")
    click.echo(f"Wrote {env_path}")


# ---------------------------------------------------------------------------
# credentials
# ---------------------------------------------------------------------------


@cli.group()
def credentials():
    """Manage saved service credentials."""


@credentials.command("list")
@click.pass_context
def credentials_list(ctx: click.Context):
    """Show which services are configured and where from."""
    manager = _playground(ctx).credential_manager()
    for service, spec in manager.specs.items():
        source = manager.source(service)
        status = f"configured ({source})" if source else "not configured"
        click.echo(f"  {spec.title:<16} {service:<12} {status}")


def _require_service(service: str):
    spec = CREDENTIAL_SPECS.get(service)
    if spec is None:
        raise click.ClickException(
            f"Unknown service '{service}'. Available: {', '.join(CREDENTIAL_SPECS)}"
        )
    return spec


@credentials.command("set")
@click.argument("service")
@click.pass_context
def credentials_set(ctx: click.Context, service: str):
    """Prompt for and save a service's credentials."""
    spec = _require_service(service)
    values = prompt_for_credentials(spec)
    store = _playground(ctx).store
    store.save(service, values)
    click.echo(f"Saved {spec.title} credentials to {store.path}")


@credentials.command("remove")
@click.argument("service")
@click.pass_context
def credentials_remove(ctx: click.Context, service: str):
    """Delete a service's saved credentials."""
    spec = _require_service(service)
    if _playground(ctx).store.remove(service):
        click.echo(f"Removed {spec.title} credentials")
    else:
        click.echo(f"No saved credentials for {spec.title}")


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--host", help="Interface to bind (default from configuration)")
@click.option("--port", type=int, help="Port to listen on (default from configuration)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None):
    """Start the web playground API."""
    playground = _playground(ctx)
    config = PlaygroundServerConfig(
        host=host or playground.config.web_host,
        port=port if port is not None else playground.config.web_port,
    )
    server = PlaygroundServer(playground, config)

    async def _serve():
        await server.start()
        click.echo(f"Playground API running at http://{config.host}:{server.port} (Ctrl+C to stop)")
        try:
            await asyncio.Event().wait()
        finally:
            await server.stop()

    try:
        asyncio.run(_serve())
    except KeyboardInterrupt:
        click.echo("\nStopped")


def main():
    cli()


if __name__ == "__main__":
    main()
