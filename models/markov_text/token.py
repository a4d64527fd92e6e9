class Token:
    """
    An atomic unit of text: a word, a punctuation mark, a compound word or
    the newline placeholder.

    Tokens are immutable and compare by content, so a token built by joining
    several others (a context key) can be used directly as a dictionary key.
    A token also compares equal to a plain string with the same content.

    Attributes:
        content (str): The characters the token is made of.
    """

    __slots__ = ("_content",)

    def __init__(self, content):
        if content is None:
            content = ""
        object.__setattr__(self, "_content", str(content))

    @classmethod
    def from_tokens(cls, tokens):
        """
        Build a composite token by concatenating the contents of other tokens.

        Args:
            tokens (iterable): Tokens (or strings) to concatenate, no separator.

        Returns:
            Token: A token whose content is the concatenation.

        Example:
            >>> Token.from_tokens([Token("the"), Token("cat")])
            Token('thecat')
        """
        return cls("".join(str(token) for token in tokens))

    @property
    def content(self):
        return self._content

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __len__(self):
        return len(self._content)

    def __eq__(self, other):
        if isinstance(other, Token):
            return self._content == other._content
        if isinstance(other, str):
            return self._content == other
        return NotImplemented

    def __hash__(self):
        # Same hash as the bare string so either can probe the matrix
        return hash(self._content)

    def __str__(self):
        return self._content

    def __repr__(self):
        return f"Token({self._content!r})"
