import click
from typing import Optional, TextIO, Tuple
from .command.replay import ReplayCommand
from ..formatter import FORMATTERS
from ..walker import ListenerErrorPolicy, WalkerConfig


def create_scenario_commands() -> click.Command:
    """Create the replay command."""

    @click.command(name='replay')
    @click.argument('scenario_file', type=click.File('r'), required=False)
    @click.option('--format', '-f', 'formats',
                  type=click.Choice(list(FORMATTERS.keys())),
                  multiple=True,
                  default=('pretty', 'summary'),
                  help='Formatter to report with; repeat for several')
    @click.option('--out', type=click.Path(dir_okay=False), help='Write the json report to this file')
    @click.option('--dry-run', is_flag=True, help='Report steps without invoking them or running hooks')
    @click.option('--listener-errors',
                  type=click.Choice([p.value for p in ListenerErrorPolicy]),
                  default=ListenerErrorPolicy.ISOLATE.value,
                  help='Keep walking when a formatter fails (isolate) or abort (raise)')
    @click.option('--strict', is_flag=True, help='Fail on undefined and pending steps')
    @click.pass_context
    def replay(ctx, scenario_file: Optional[TextIO], formats: Tuple[str, ...], out: Optional[str],
               dry_run: bool, listener_errors: str, strict: bool):
        """Replay recorded scenario results from a YAML file or stdin.

        Every step is walked in order and reported to the selected formatters.
        """
        config = WalkerConfig(
            listener_errors=ListenerErrorPolicy(listener_errors),
            dry_run=dry_run,
            strict=strict
        )
        command = ReplayCommand(logger=ctx.obj.logger, config=config)
        ctx.exit(command.run(scenario_file, list(formats), out))

    return replay
