"""
Tokenizer Module

Splits source text into tokens and joins generated tokens back into text.

### Token kinds (leftmost alternative wins at each position):
1. **Ellipsis**: exactly three periods, ``...``.
2. **Compound word**: two words joined by one hyphen, ``well-known``.
3. **Word**: a run of Latin or Cyrillic letters (``ё``/``Ё`` included).
4. **Punctuation**: a single character from ``PUNCTUATION``.

Line breaks (``\\r\\n``, ``\\r`` or ``\\n``) are replaced with ``NEWLINE_PLACEHOLDER``
before matching, so each one becomes a punctuation token. Anything else,
whitespace and digits included, is dropped.

### Example Usage:

```python
tokens = Tokenizer.tokenize("Hello, world...")
# [Token('Hello'), Token(','), Token('world'), Token('...')]

Tokenizer.join(tokens)
# 'Hello,world...'
```

Whitespace is never restored by ``join``, and every line break comes back as
a blank line (two newlines).
"""

import re

from models.markov_text.token import Token

NEWLINE_PLACEHOLDER = "§"
NEWLINE_ORIGINAL = "\n\n"

PUNCTUATION = [
    "[", "]", "(", ")", "{", "}", "!", "?",
    ".", ",", ":", ";", "'", '"', "\\", "/",
    "*", "&", "^", "%", "$", "_", "+", "-",
    "–", "—", "=", "<", ">", "@", "|", "~", NEWLINE_PLACEHOLDER,
]

NEWLINE_PATTERN = r"\r\n?|\n"
ELLIPSIS_PATTERN = r"\.{3}"
WORD_PATTERN = r"[a-zA-Zа-яА-ЯёЁ]+"
COMPOUND_WORD_PATTERN = f"{WORD_PATTERN}-{WORD_PATTERN}"
PUNCTUATION_PATTERN = "[" + "".join(re.escape(char) for char in PUNCTUATION) + "]"

_NEWLINE_REGEX = re.compile(NEWLINE_PATTERN)
_TOKEN_REGEX = re.compile(
    "|".join([ELLIPSIS_PATTERN, COMPOUND_WORD_PATTERN,
             WORD_PATTERN, PUNCTUATION_PATTERN])
)


class Tokenizer:
    """Stateless helpers for turning text into tokens and back."""

    @staticmethod
    def tokenize(text):
        """
        Split text into tokens.

        Args:
            text (str or None): The text to split. ``None`` gives no tokens.

        Returns:
            list: Tokens in the order they appear in the text.
        """
        if text is None:
            return []

        text = _NEWLINE_REGEX.sub(NEWLINE_PLACEHOLDER, text)

        return [Token(match) for match in _TOKEN_REGEX.findall(text) if match]

    @staticmethod
    def join(tokens):
        """
        Combine tokens into a string.

        Args:
            tokens (iterable): Tokens (or strings) to combine.

        Returns:
            str: The concatenated contents with placeholders turned into blank lines.
        """
        text = "".join(str(token) for token in tokens)

        return text.replace(NEWLINE_PLACEHOLDER, NEWLINE_ORIGINAL)
