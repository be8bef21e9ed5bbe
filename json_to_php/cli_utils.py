"""
CLI utilities used to describe how a file was generated.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__

COMMAND_NAME = "json_to_php"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct the command line from the current Click context.

    Paths are shortened to their file names so the generated header does not
    depend on where the command was run.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string, or just the command name when no
        Click context is active
    """
    try:
        ctx = click.get_current_context()
    except RuntimeError:
        return COMMAND_NAME

    cli_args = ctx.params
    arguments = []
    options = []
    for param in click_command.params:
        value = cli_args.get(param.name)
        if value is None or value is False or value == param.default:
            continue

        if isinstance(param, click.Argument):
            arguments.append(Path(str(value)).name)
        elif isinstance(param, click.Option):
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                formatted = Path(str(value)).name if isinstance(param.type, click.Path) else str(value)
                options.extend([flag, formatted])

    return " ".join([COMMAND_NAME, *arguments, *options])


def generation_comment(click_command: click.Command | None = None) -> str:
    """Return the one-line header describing the generator and its invocation."""
    command_line = reconstruct_command_line(click_command) if click_command is not None else COMMAND_NAME
    return f"Generated by json_to_php {__version__}: {command_line}"
