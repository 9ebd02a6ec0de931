"""Text generator interface shared by the guardrail and the API"""

from typing import Optional, Protocol


class TextGenerator(Protocol):
    """Anything that can asynchronously complete a system/user prompt pair"""

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        ...
