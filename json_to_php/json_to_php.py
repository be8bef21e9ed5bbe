import json

import click

from .cli_utils import generation_comment
from .errors import InputUnreadableError, JSONParseError, JsonToPhpError, MissingArgumentsError
from .logging_config import setup_logging
from .pipeline import CodeGeneratorConfig, CollisionPolicy, OutputMode, generate_from_path, write_output


def _load_config(path):
    try:
        with open(path, encoding="utf-8") as f:
            return CodeGeneratorConfig.from_dict(json.load(f))
    except json.JSONDecodeError as e:
        raise JSONParseError(f"Invalid config file: {e}", document=path, line=e.lineno, column=e.colno) from e
    except (OSError, ValueError) as e:
        raise InputUnreadableError(f"Invalid config file: {e}", document=path) from e


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Root class name (defaults to the input file name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--mode",
    "-m",
    default=None,
    type=click.Choice([mode.value for mode in OutputMode]),
    help="Overwrite the output file (force) or refuse if it exists (error)",
)
@click.option(
    "--on-collision",
    default=None,
    type=click.Choice([policy.value for policy in CollisionPolicy]),
    help="Keep the last class sharing a property name (overwrite) or fail (error)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output")
@click.argument("input_path", required=False, default=None, type=click.Path(resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def json_to_php(name, config, mode, on_collision, verbose, input_path, output):
    """Generate PHP classes from the JSON document(s) at INPUT_PATH into OUTPUT."""
    setup_logging(verbose)
    try:
        if input_path is None or output is None:
            raise MissingArgumentsError(
                "Input and output arguments are required, for example `json_to_php input.json output.php`."
            )

        config = _load_config(config) if config is not None else CodeGeneratorConfig()

        # CLI flags override the config file
        if mode is not None:
            config.output.mode = OutputMode(mode)
        if on_collision is not None:
            config.class_collision = CollisionPolicy(on_collision)

        click.echo(f"Parsing json from {input_path}...")
        code = generate_from_path(input_path, config, name, generation_comment(json_to_php))

        click.echo(f"Writing definitions to {output}...")
        write_output(output, code, config)
    except JsonToPhpError as e:
        raise click.ClickException(str(e)) from e

    click.echo("Done.")
