from abc import ABC, abstractmethod

# Either a plain prompt or a list of chat content parts (text / image_url).
UserContent = str | list[dict[str, object]]


class BaseExtractionClient(ABC):
    """Contract for provider-specific extraction AI clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_content: UserContent,
        json_schema: dict[str, object],
    ) -> str:
        """Return provider response as plain text."""
