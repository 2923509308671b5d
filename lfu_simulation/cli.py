import click

from lfu_simulation.cache.lfuCache import LFUCache
from lfu_simulation.config import SimulationConfig
from lfu_simulation.simulation import (
    format_frequency_table,
    format_steps,
    parse_numbers,
    run_simulation
)


@click.group()
def cli():
    """LFU Cache Simulation CLI"""
    pass


@cli.command()
@click.option('--numbers', help='Numbers to request, separated by spaces')
@click.option(
    '--rows',
    type=click.IntRange(min=1),
    help='Number of cache rows (default: LFU_NUM_ROWS or 3)'
)
@click.option(
    '--max-numbers',
    type=click.IntRange(min=1),
    help='Maximum numbers to simulate (default: LFU_MAX_NUMBERS or 15)'
)
def simulate(numbers, rows, max_numbers):
    """Runs the LFU page replacement simulation."""
    config = SimulationConfig.from_env()
    if rows is None:
        rows = config.num_rows
    if max_numbers is None:
        max_numbers = config.max_numbers

    if numbers is None:
        numbers = click.prompt(
            f"Enter up to {max_numbers} numbers (separated by spaces)",
            default="",
            show_default=False
        )

    parsed, invalid = parse_numbers(numbers, max_numbers=max_numbers)
    for token in invalid:
        click.echo(f"Invalid number: {token}")

    if not parsed:
        click.echo("No numbers to simulate.")
        return

    result = run_simulation(parsed, num_rows=rows)

    click.echo("\nSimulation Results:")
    click.echo(format_steps(result.steps))

    click.echo("\nFinal Frequency Table:")
    click.echo(format_frequency_table(result.final_table))

    click.echo(
        f"\nHits: {result.hits}  Faults: {result.faults}  "
        f"Hit ratio: {result.hit_ratio:.2%}"
    )


@cli.command()
@click.option(
    '--capacity',
    default=3,
    type=click.IntRange(min=0),
    help='Cache capacity'
)
def demo(capacity):
    """Runs the classic LFU cache example."""
    cache = LFUCache(capacity)

    def show_get(key):
        value, found = cache.get(key)
        click.echo(f"get({key}) -> {value if found else -1}")

    for key, value in [(1, 10), (2, 20), (3, 30)]:
        cache.put(key, value)

    show_get(1)
    show_get(2)

    # Exceeds capacity 3: key 3 has the lowest frequency
    cache.put(4, 40)
    click.echo("put(4, 40)")

    for key in (3, 1, 2, 4):
        show_get(key)

    click.echo("\nFrequency Table:")
    click.echo(format_frequency_table(cache.frequency_table()))


if __name__ == '__main__':
    cli()
