import click

from leaseweb_provider.cli import capabilities, check, metadata, schema


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Leaseweb provider CLI"""
    # Show help when no subcommand is provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(metadata)
cli.add_command(schema)
cli.add_command(capabilities)
cli.add_command(check)


if __name__ == "__main__":
    cli()
