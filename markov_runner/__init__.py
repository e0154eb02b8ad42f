from markov_runner.strategies import MatchingStrategy, default_rng, locate, occurrences
from markov_runner.nodes import Node, Rule, Sequence, RandomChoice

FIRST = MatchingStrategy.FIRST
LAST = MatchingStrategy.LAST
RANDOM = MatchingStrategy.RANDOM


def step(input, node):
    return node.apply(input)


def run(input, node, callback=None):
    """
    Rewrites `input` with `node` until a step no longer matches and returns
    the last string. There is no step limit: a rule set that never stops
    matching never returns. Use `run_bounded` to cap it.
    """
    current = input
    index = 0
    while True:
        result = step(current, node)
        if result is None:
            return current
        current = result
        if callback is not None:
            callback(index, current)
        index += 1


def steps(input, node):
    current = step(input, node)
    while current is not None:
        yield current
        current = step(current, node)


def run_bounded(input, node, max_steps):
    """
    Like `run`, but stops after `max_steps` successful steps.
    Returns (string, converged), where converged is False if all `max_steps`
    steps rewrote the string and no failing step was observed.
    """
    if max_steps < 0:
        raise ValueError("max_steps must be non-negative")

    current = input
    for _ in range(max_steps):
        result = step(current, node)
        if result is None:
            return current, True
        current = result
    return current, False
