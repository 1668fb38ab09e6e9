"""Abstract base class for completion providers."""

from abc import ABC, abstractmethod


class CompletionProvider(ABC):
    """Abstract completion provider interface."""

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """Send a single user prompt and return the raw completion text.

        Makes exactly one attempt; retrying is the caller's job.

        Raises:
            TransportError: The request did not get a response.
            ResponseError: The API returned an error status or no content.
        """
