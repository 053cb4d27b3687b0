import click
from src.modules.scenario.commands import create_scenario_commands
from src.modules.logging import create_logger, LOG_LEVELS


class StepwalkContext:
    """Context object to store CLI state."""
    def __init__(self):
        self.logger = None

pass_context = click.make_pass_decorator(StepwalkContext, ensure=True)

@click.group()
@click.option('--output', '-o',
              type=click.Choice(['colorful', 'plain', 'json']),
              default='colorful',
              help='Log format (colorful for CLI, plain for CI/file, json for machine parsing)',
              envvar='STEPWALK_OUTPUT')
@click.option('--log-level', '-l',
              type=click.Choice(list(LOG_LEVELS)),
              default='WARNING',
              help='Set the logging level',
              envvar='STEPWALK_LOG_LEVEL')
@pass_context
def cli(ctx, output, log_level):
    """Stepwalk CLI Tool: walk scenario results and report them to formatters."""
    ctx.logger = create_logger(output, log_level)

cli.add_command(create_scenario_commands())

def main():
    cli()

if __name__ == '__main__':
    main()
