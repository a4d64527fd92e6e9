"""
Markov chain text generator.

The generator is trained once, when it is constructed, and then produces a
lazy, bounded stream of tokens.

Generation keeps a rolling history of the tokens chosen so far. At each step
the last ``sample_size - 1`` tokens of the history are joined into a key and
a random target is drawn from the transition matrix:

- **hit**: the target is emitted and appended to the history;
- **miss** with at least ``sample_size`` tokens of history: the last token is
  dropped (backtrack) so the next lookup uses a different context;
- **miss** with a shorter history: the history is replaced by a random key
  from the matrix, tokenized again (reseed).

Only tokens produced by hits are emitted; the tokens used to seed the
history are not.
"""

import random

from models.markov_text.errors import ConfigurationError, EmptyModelError
from models.markov_text.generator_utils import build_transition_matrix, get_samples
from models.markov_text.token import Token
from models.markov_text.tokenizer import Tokenizer
from utils.loggers.json_logger import get_logger
from utils.system_monitoring import ResourceMonitor

SEQUENCE_LENGTH_DEFAULT = 200
SAMPLE_SIZE_DEFAULT = 2


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


class Generator:
    """
    Builds a transition matrix from a source text and generates token sequences.

    Attributes:
        source_text (str): Text the matrix was built from.
        sequence_length (int): Maximum number of tokens a run emits.
        sample_size (int): Tokens per training sample; lookups use ``sample_size - 1``.
        tokens (list): Tokens of the source text.
    """

    def __init__(
        self,
        source_text,
        sequence_length=SEQUENCE_LENGTH_DEFAULT,
        sample_size=SAMPLE_SIZE_DEFAULT,
        rng=None,
        seed=None,
        logger=None
    ):
        """
        Train the generator on a source text.

        Args:
            source_text (str): Text to learn transitions from.
            sequence_length (int): Maximum number of tokens to generate. Zero or
                negative values are accepted and generate nothing.
            sample_size (int): Number of tokens per sample (default: 2, a
                first-order chain over single tokens).
            rng (random.Random, optional): Random source. Takes precedence over ``seed``.
            seed (int, optional): Seed for a private ``random.Random`` when ``rng`` is not given.
            logger (Logger, optional): Logger for training and generation events.

        Raises:
            ConfigurationError: If ``sample_size`` is not a positive integer or
                ``sequence_length`` is not an integer.
            EmptyModelError: If the source text yields no samples.
        """
        self.logger = logger or get_logger(__name__, clear_existing=False)

        if not _is_int(sample_size) or sample_size <= 0:
            error_msg = f"Sample size must be a positive integer, got {sample_size!r}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg)

        if not _is_int(sequence_length):
            error_msg = f"Sequence length must be an integer, got {sequence_length!r}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg)

        self.source_text = source_text
        self.sequence_length = sequence_length
        self.sample_size = sample_size

        self._random = rng if rng is not None else random.Random(seed)
        self._emitted = 0
        self._backtracks = 0
        self._reseeds = 0

        self.resource_monitor = ResourceMonitor(logger=self.logger)
        self.resource_monitor.start("training")

        self.tokens = Tokenizer.tokenize(source_text)
        samples = get_samples(self.tokens, sample_size)

        if not samples:
            self.resource_monitor.stop()
            error_msg = (
                f"Source text has {len(self.tokens)} tokens, "
                f"too few for samples of size {sample_size}"
            )
            self.logger.error(error_msg, extra={
                "metrics": {"tokens": len(self.tokens), "sample_size": sample_size}
            })
            raise EmptyModelError(error_msg)

        self._transition_matrix = build_transition_matrix(samples)
        self._keys = list(self._transition_matrix)

        self.resource_monitor.log_progress("Transition matrix built", extra_metrics={
            "tokens": len(self.tokens),
            "samples": len(samples),
            "keys": len(self._keys),
            "sample_size": sample_size,
            "sequence_length": sequence_length
        })
        self.resource_monitor.stop()

        self._generated_tokens = self._initialize_sequence()

    @property
    def transition_matrix(self):
        """dict: Context token to the list of observed target tokens."""
        return self._transition_matrix

    def generate(self):
        """
        Generate a sequence of tokens.

        Yields tokens lazily; stop iterating at any time. A generator object
        can only be run to the length limit once, further calls yield nothing.

        Yields:
            Token: The next generated token, at most ``sequence_length`` in total.
        """
        while self._emitted < self.sequence_length:
            next_token = self._generate_next_token()

            if next_token is not None:
                self._generated_tokens.append(next_token)
                self._emitted += 1
                yield next_token
            elif len(self._generated_tokens) >= self.sample_size:
                self._generated_tokens.pop()
                self._backtracks += 1
                self.logger.debug("Dead end, backtracking", extra={
                    "metrics": {"history": len(self._generated_tokens)}
                })
            else:
                self._generated_tokens = self._initialize_sequence()

        self.logger.info("Text generation completed", extra={
            "metrics": {
                "tokens_generated": self._emitted,
                "backtracks": self._backtracks,
                "reseeds": self._reseeds,
                "sample_size": self.sample_size
            }
        })

    def generate_text(self):
        """
        Generate a sequence and join it into text.

        Returns:
            str: The generated tokens joined by ``Tokenizer.join``.
        """
        return Tokenizer.join(self.generate())

    def _generate_next_token(self):
        """
        Predict the next token from the tail of the history.

        Returns:
            Token or None: A random target for the current context, or None on a dead end.
        """
        context_size = self.sample_size - 1
        context = self._generated_tokens[-context_size:] if context_size else []

        targets = self._transition_matrix.get(Token.from_tokens(context))
        if not targets:
            return None

        return self._random.choice(targets)

    def _initialize_sequence(self):
        """
        Start a new history from a random key of the matrix.

        Returns:
            list: The key re-tokenized; at most ``sample_size - 1`` tokens.
        """
        random_key = self._random.choice(self._keys)
        self._reseeds += 1
        self.logger.debug("Sequence reseeded", extra={
            "metrics": {"key": random_key.content}
        })

        return Tokenizer.tokenize(random_key.content)
