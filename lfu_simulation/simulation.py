"""LFU page replacement simulation over a row cache."""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from loguru import logger

from lfu_simulation.cache.rowCache import RowCache
from lfu_simulation.config import DEFAULT_MAX_NUMBERS, DEFAULT_NUM_ROWS

FrequencyTable = List[Tuple[int, List[int]]]

# Optional sign followed by ASCII digits only
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class SimulationStep:
    """Outcome of requesting one number from the cache."""

    number: int
    hit: bool
    row: int
    removed: Optional[int] = None
    state: str = ""
    frequencies: Dict[int, int] = field(default_factory=dict)

    @property
    def operation(self) -> str:
        if self.hit:
            return "Page Hit"
        operation = "Page Fault"
        if self.removed is not None:
            operation += f" (Removed: {self.removed})"
        return operation + f" (Added to Row: {self.row})"


@dataclass
class SimulationResult:
    """All steps of a simulation run plus the final frequency table."""

    num_rows: int
    steps: List[SimulationStep]
    final_table: FrequencyTable

    @property
    def hits(self) -> int:
        return sum(1 for step in self.steps if step.hit)

    @property
    def faults(self) -> int:
        return len(self.steps) - self.hits

    @property
    def hit_ratio(self) -> float:
        if not self.steps:
            return 0.0
        return self.hits / len(self.steps)


def parse_numbers(
    text: str,
    max_numbers: int = DEFAULT_MAX_NUMBERS
) -> Tuple[List[int], List[str]]:
    """
    Parse whitespace separated numbers.

    Args:
        text: Raw user input
        max_numbers: Maximum number of valid numbers to keep

    Returns:
        Tuple of (numbers, invalid_tokens)
    """
    numbers: List[int] = []
    invalid: List[str] = []

    for token in text.split():
        if NUMBER_PATTERN.fullmatch(token):
            numbers.append(int(token))
        else:
            logger.warning(f"Skipping invalid number: {token!r}")
            invalid.append(token)

    if len(numbers) > max_numbers:
        logger.info(
            f"Got {len(numbers)} numbers, keeping the first {max_numbers}"
        )
        numbers = numbers[:max_numbers]

    return numbers, invalid


def format_state(table: FrequencyTable) -> str:
    """Render a frequency table on one line, highest frequency first."""
    return " ".join(f"{freq}:{keys}" for freq, keys in table)


def simulate_step(cache: RowCache, number: int) -> SimulationStep:
    """
    Request a number from the cache.

    A cached number is a page hit and has its frequency incremented.
    Otherwise it is a page fault: if the cache is full the least
    frequently used number is removed, then the number is inserted.

    Args:
        cache: Row cache being simulated
        number: Requested number

    Returns:
        SimulationStep describing what happened
    """
    if cache.contains(number):
        cache.increment_frequency(number)
        step = SimulationStep(number=number, hit=True, row=cache.row_of(number))
    else:
        removed = None
        if cache.is_full():
            removed = cache.remove_lfu()
        row = cache.insert(number)
        step = SimulationStep(number=number, hit=False, row=row, removed=removed)

    step.state = format_state(cache.frequency_table())
    step.frequencies = cache.get_frequencies()
    return step


def run_simulation(
    numbers: Iterable[int],
    num_rows: int = DEFAULT_NUM_ROWS
) -> SimulationResult:
    """
    Run the LFU simulation over a sequence of numbers.

    Args:
        numbers: Requested numbers in order
        num_rows: Number of cache rows

    Returns:
        SimulationResult with one step per number
    """
    cache = RowCache(num_rows)
    steps = [simulate_step(cache, number) for number in numbers]
    result = SimulationResult(
        num_rows=num_rows,
        steps=steps,
        final_table=cache.frequency_table(),
    )
    logger.debug(
        f"Simulated {len(steps)} requests on {num_rows} rows: "
        f"{result.hits} hits, {result.faults} faults"
    )
    return result


def format_steps(steps: Iterable[SimulationStep]) -> str:
    """Render simulation steps as a tab separated table."""
    lines = ["Number\t| Operation\t| Cache State\t| Frequencies"]
    for step in steps:
        lines.append(
            f"{step.number}\t| {step.operation}\t| {step.state}\t| {step.frequencies}"
        )
    return "\n".join(lines)


def format_frequency_table(table: FrequencyTable) -> str:
    """Render a frequency table, highest frequency first."""
    lines = ["Frequency\t| Numbers"]
    for freq, keys in table:
        lines.append(f"{freq}\t\t| {keys}")
    return "\n".join(lines)
