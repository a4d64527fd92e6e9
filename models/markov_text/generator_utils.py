"""
Training helpers for the text generator: sliding-window sample extraction
and transition matrix construction.
"""

from collections import defaultdict

from models.markov_text.errors import ConfigurationError
from models.markov_text.token import Token


def get_samples(tokens, sample_size):
    """
    Split a list of tokens into samples through a sliding window.

    Args:
        tokens (list): Tokens of the source text.
        sample_size (int): Width of the window. The first ``sample_size - 1``
            tokens of each sample are the context, the last one the target.

    Returns:
        list: ``max(0, len(tokens) - sample_size + 1)`` samples, left to right.

    Raises:
        ConfigurationError: If ``sample_size`` is not a positive integer.

    Example:
        >>> get_samples(["the", "cat", "sat"], 2)
        [['the', 'cat'], ['cat', 'sat']]
    """
    if isinstance(sample_size, bool) or not isinstance(sample_size, int) or sample_size <= 0:
        raise ConfigurationError(
            f"Sample size must be a positive integer, got {sample_size!r}")

    tokens = list(tokens)
    return [tokens[i: i + sample_size] for i in range(len(tokens) - sample_size + 1)]


def build_transition_matrix(samples):
    """
    Build a transition matrix from samples.

    Each sample's context (all tokens but the last) is joined into a single
    key token; the last token is appended to the list stored under that key.
    Repeated observations are kept, so a target seen twice is twice as likely
    to be picked.

    Args:
        samples (iterable): Samples produced by ``get_samples``.

    Returns:
        dict: Mapping of context token to the list of observed target tokens.

    Example:
        Samples ``[the, cat]`` and ``[the, dog]`` give ``{the: [cat, dog]}``.
    """
    transition_matrix = defaultdict(list)

    for sample in samples:
        source = Token.from_tokens(sample[:-1])
        target = sample[-1]
        if not isinstance(target, Token):
            target = Token(target)

        transition_matrix[source].append(target)

    # Plain dict so lookups of unknown keys never insert empty lists
    return dict(transition_matrix)
