"""CLI interface for badgegen."""

import logging
from typing import Annotated, Any, NoReturn

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from badgegen.badges import image_url, render_badge
from badgegen.errors import BadgeError
from badgegen.models import BadgeSpec
from badgegen.url_utils import encode_param
from badgegen.user_config import (
    apply_user_defaults,
    get_config_path,
    get_default_config_template,
    load_user_config,
    save_user_config,
)

app = typer.Typer(
    name="badgegen",
    help="Generate markdown badges for the shields.io badge service.",
    no_args_is_help=True,
)

config_app = typer.Typer(
    name="config",
    help="Manage user-level default preferences.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

console = Console()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

LabelOption = Annotated[str, typer.Option("--label", "-l", help="Left-hand text of the badge")]
LargeOption = Annotated[
    bool | None,
    typer.Option("--large/--standard", help="Use the 'for-the-badge' style"),
]
TargetOption = Annotated[str, typer.Option("--target", "-t", help="Link to wrap the badge in")]
LogoOption = Annotated[str, typer.Option("--logo", help="Logo name, e.g. 'github'")]
LogoColorOption = Annotated[
    str | None, typer.Option("--logo-color", help="Logo color, ignored without --logo")
]
ParamsOption = Annotated[
    bool | None,
    typer.Option("--params/--dash", help="Use the query-param API instead of the dash path"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")]


def _resolve_spec(message: str, color: str | None, **options: Any) -> BadgeSpec:
    """Merge CLI options with user defaults and build a badge spec."""
    spec_options = apply_user_defaults({"color": color, **options})
    if not spec_options.get("color"):
        rprint("[red]Error: a color is required (argument or 'color' in user config)[/red]")
        raise typer.Exit(1)

    return BadgeSpec(
        message=message,
        **{key: value for key, value in spec_options.items() if value is not None},
    )


def _fail(error: Exception) -> NoReturn:
    rprint(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(1)


@app.command("badge")
def badge_cmd(
    message: Annotated[str, typer.Argument(help="Right-hand text of the badge")],
    color: Annotated[
        str | None, typer.Argument(help="Message color, e.g. 'green' or 'ff69b4'")
    ] = None,
    label: LabelOption = "",
    large: LargeOption = None,
    target: TargetOption = "",
    logo: LogoOption = "",
    logo_color: LogoColorOption = None,
    params: ParamsOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print markdown for a generic badge."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    spec = _resolve_spec(
        message,
        color,
        label=label,
        is_large=large,
        target=target,
        logo=logo,
        logo_color=logo_color,
        only_query_params=params,
    )
    try:
        markdown = render_badge(spec)
    except BadgeError as e:
        _fail(e)

    typer.echo(markdown)


@app.command("url")
def url_cmd(
    message: Annotated[str, typer.Argument(help="Right-hand text of the badge")],
    color: Annotated[
        str | None, typer.Argument(help="Message color, e.g. 'green' or 'ff69b4'")
    ] = None,
    label: LabelOption = "",
    large: LargeOption = None,
    logo: LogoOption = "",
    logo_color: LogoColorOption = None,
    params: ParamsOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print only the image URL for a generic badge."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    spec = _resolve_spec(
        message,
        color,
        label=label,
        is_large=large,
        logo=logo,
        logo_color=logo_color,
        only_query_params=params,
    )
    try:
        url = image_url(spec)
    except BadgeError as e:
        _fail(e)

    typer.echo(url)


@app.command("encode")
def encode_cmd(
    value: Annotated[str, typer.Argument(help="Text to escape for a dash-based badge path")],
    keep_spaces: Annotated[
        bool, typer.Option("--keep-spaces", help="Percent-encode spaces instead of '_'")
    ] = False,
) -> None:
    """Print a value escaped for the dash-based badge API."""
    typer.echo(encode_param(value, space_to_underscore=not keep_spaces))


@config_app.command("show")
def config_show_cmd() -> None:
    """Show current user configuration."""
    config_path = get_config_path()
    user_cfg = load_user_config()

    if not user_cfg:
        rprint(f"[yellow]No user config found at {config_path}[/yellow]")
        rprint("[dim]Run 'badgegen config init' to create one.[/dim]")
        return

    rprint(f"[cyan]Config file:[/cyan] {config_path}\n")
    table = Table(title="User Defaults")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in user_cfg.items():
        table.add_row(key, str(value))

    console.print(table)


@config_app.command("init")
def config_init_cmd(
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing config")] = False,
) -> None:
    """Create a default user configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        rprint(f"[yellow]Config already exists at {config_path}[/yellow]")
        rprint("[dim]Use --force to overwrite.[/dim]")
        raise typer.Exit(1)

    template = get_default_config_template()
    saved_path = save_user_config(template)
    rprint(f"[green]Created default config at {saved_path}[/green]")
    rprint("[dim]Edit this file to customize your defaults.[/dim]")


@config_app.command("path")
def config_path_cmd() -> None:
    """Print the path to the user config file."""
    rprint(str(get_config_path()))


if __name__ == "__main__":
    app()
