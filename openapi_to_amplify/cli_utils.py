"""
Rebuilds the invoking command line for the generation comment.
"""

from pathlib import Path

import click

PROGRAM_NAME = "openapi_to_amplify"


def _display_value(value) -> str:
    # Existing files are shown by name so the comment does not leak local directories
    if isinstance(value, (str, Path)) and Path(value).exists():
        return Path(value).name
    return str(value)


def _option_tokens(option: click.Option, value) -> list[str]:
    if value == option.default:
        return []
    flag = option.opts[0]
    return [flag] if option.is_flag else [flag, _display_value(value)]


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the command line of the running click command.

    Positional arguments come first, then every option whose value differs
    from its default, both in declaration order. Unset values are left out.

    Args:
        click_command: The command whose parameters are read from the context

    Returns:
        The command line, or the bare program name outside a click context
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return PROGRAM_NAME

    arguments: list[str] = []
    options: list[str] = []
    for param in click_command.params:
        value = ctx.params.get(param.name)
        if not value:
            continue
        if isinstance(param, click.Argument):
            arguments.append(_display_value(value))
        elif isinstance(param, click.Option):
            options.extend(_option_tokens(param, value))

    return " ".join([PROGRAM_NAME, *arguments, *options])
