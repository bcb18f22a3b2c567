"""Port for the external text-generation collaborator."""

from typing import Protocol


class TextGenerationPort(Protocol):
    """Port returning free text for a prompt.

    The reply may or may not contain the JSON shape the prompt asks for.
    """

    async def generate(self, prompt: str) -> str:
        """Return the model reply for ``prompt``."""


__all__ = ["TextGenerationPort"]
