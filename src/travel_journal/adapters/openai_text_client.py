"""OpenAI Responses API client for summaries and captions."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from travel_journal.services.advisory import TextGenerationClient


@dataclass
class OpenAITextClient(TextGenerationClient):
    """Text generation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAITextClient":
        """Create an OpenAI text client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(
        self,
        *,
        model: str,
        store: bool,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        """Call OpenAI Responses API and return the output text."""
        content: list[dict[str, object]] = [{"type": "input_text", "text": prompt}]
        if image_data_url is not None:
            content.append({"type": "input_image", "image_url": image_data_url})
        response = await self.client.responses.create(
            model=model,
            input=[{"role": "user", "content": content}],
            store=store,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text.strip()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
