"""Chain configuration for Markov Text."""

from dataclasses import dataclass


@dataclass
class ChainConfig:
    """Configuration dataclass for a Markov chain model.

    Attributes:
        order: Number of consecutive words that form one state.
        max_word_count: Safety ceiling on the length of a generated sentence.
            Reaching it means the walk is stuck in a cycle.
    """

    order: int = 2
    max_word_count: int = 1000

    def validate(self) -> None:
        """Validate the configuration values."""
        if self.order < 1:
            raise ValueError("order must be a positive integer")
        if self.max_word_count < 1:
            raise ValueError("max_word_count must be positive")
