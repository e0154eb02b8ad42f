from markov_runner.nodes import RandomChoice, Rule, Sequence


def binary_to_unary():
    # "110" -> "xxxxxx"
    return (
        Sequence()
        .add_node(Rule("1", "0x"))
        .add_node(Rule("x0", "0xx"))
        .add_node(Rule("0", ""))
    )


def random_march(rng=None):
    return (
        RandomChoice(rng=rng)
        .add_node(Rule("OXO", "OOX"))
        .add_node(Rule("OXO", "XOO"))
    )


ALGORITHMS = {
    "binary-to-unary": binary_to_unary,
    "random-march": random_march,
}
