from markov_runner.strategies import MatchingStrategy, default_rng, locate


class Node:
    def apply(self, input):
        """
        Attempts one rewrite of `input`. Returns the new string, or None when
        nothing matched.
        """
        raise NotImplementedError


class Rule(Node):
    def __init__(self, pattern, replacement, strategy=MatchingStrategy.FIRST, rng=None):
        if len(pattern) == 0:
            raise ValueError("rule pattern must not be empty")
        self._pattern = pattern
        self._replacement = replacement
        self._strategy = MatchingStrategy(strategy)
        self._rng = rng

    @property
    def pattern(self):
        return self._pattern

    @property
    def replacement(self):
        return self._replacement

    @property
    def strategy(self):
        return self._strategy

    def apply(self, input):
        index = locate(input, self._pattern, self._strategy, rng=self._rng)
        if index is None:
            return None
        return input[:index] + self._replacement + input[index + len(self._pattern) :]

    def __repr__(self):
        return f"Rule({self._pattern!r}, {self._replacement!r}, {self._strategy.name})"


class _Composite(Node):
    def __init__(self, *nodes):
        self._nodes = []
        for node in nodes:
            self.add_node(node)

    @property
    def nodes(self):
        return tuple(self._nodes)

    def add_node(self, node):
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")
        self._nodes.append(node)
        return self

    def __len__(self):
        return len(self._nodes)

    def __repr__(self):
        return "{}({})".format(
            type(self).__name__, ", ".join(repr(node) for node in self._nodes)
        )


class Sequence(_Composite):
    """
    Tries each child in the order they were added and returns the first
    rewrite. Earlier children pre-empt later ones.
    """

    def apply(self, input):
        for node in self._nodes:
            result = node.apply(input)
            if result is not None:
                return result
        return None


class RandomChoice(_Composite):
    """
    Picks one child uniformly at random and returns whatever it returns. A
    chosen child that does not match gives None; siblings are not tried.
    """

    def __init__(self, *nodes, rng=None):
        super().__init__(*nodes)
        self._rng = rng

    def apply(self, input):
        if not self._nodes:
            return None
        rng = default_rng() if self._rng is None else self._rng
        return self._nodes[int(rng.integers(len(self._nodes)))].apply(input)
