"""Generated trip summaries and photo captions.

Both operations are decorative: they never raise. A missing credential
yields a "disabled" result without calling the model, and any model error
yields a "failed" result. Either way the result carries placeholder text the
caller can show as-is.
"""

import base64
import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

logger = logging.getLogger(__name__)

SUMMARY_DISABLED = "API Key not configured. Summary feature disabled."
SUMMARY_FAILED = "Could not generate summary due to an error."
CAPTION_DISABLED = "API Key not configured. Caption feature disabled."
CAPTION_FAILED = "Could not generate caption due to an error."

SUMMARY_PROMPT = (
    "Summarize the following travel journal entries into a short, engaging "
    "paragraph. Focus on the key experiences and feelings described:"
    "\n\n---\n{text}\n---"
)
CAPTION_PROMPT = (
    "Describe this image for a travel journal. Suggest a short, poetic caption."
)


class TextGenerationClient(Protocol):
    """Interface for a generative text model."""

    async def generate(
        self,
        *,
        model: str,
        store: bool,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        """Return generated text for a prompt and optional image."""


class AdvisoryStatus(StrEnum):
    OK = "ok"
    DISABLED = "disabled"
    FAILED = "failed"


@dataclass(frozen=True)
class AdvisoryResult:
    """Generated text, or a placeholder with the reason it was used."""

    status: AdvisoryStatus
    text: str

    @property
    def ok(self) -> bool:
        return self.status is AdvisoryStatus.OK


@dataclass
class AdvisoryService:
    """Service that prepares prompts and absorbs model failures."""

    client: TextGenerationClient | None
    model: str
    store: bool = False

    @property
    def enabled(self) -> bool:
        return self.client is not None

    async def summarize(self, text: str) -> AdvisoryResult:
        """Summarize journal text into a short paragraph."""
        return await self._generate(
            prompt=SUMMARY_PROMPT.format(text=text),
            image_data_url=None,
            disabled_text=SUMMARY_DISABLED,
            failed_text=SUMMARY_FAILED,
        )

    async def caption(
        self, image_bytes: bytes, mime_type: str | None = None
    ) -> AdvisoryResult:
        """Suggest a caption for raw image bytes."""
        return await self.caption_data_url(_to_data_url(image_bytes, mime_type))

    async def caption_data_url(self, data_url: str) -> AdvisoryResult:
        """Suggest a caption for an image already encoded as a data URL."""
        if self.enabled and not _is_base64_data_url(data_url):
            logger.warning("Rejected caption request with malformed data URL")
            return AdvisoryResult(AdvisoryStatus.FAILED, CAPTION_FAILED)
        return await self._generate(
            prompt=CAPTION_PROMPT,
            image_data_url=data_url,
            disabled_text=CAPTION_DISABLED,
            failed_text=CAPTION_FAILED,
        )

    async def _generate(
        self,
        *,
        prompt: str,
        image_data_url: str | None,
        disabled_text: str,
        failed_text: str,
    ) -> AdvisoryResult:
        if self.client is None:
            return AdvisoryResult(AdvisoryStatus.DISABLED, disabled_text)
        try:
            text = await self.client.generate(
                model=self.model,
                store=self.store,
                prompt=prompt,
                image_data_url=image_data_url,
            )
        except Exception:
            logger.exception("Text generation failed")
            return AdvisoryResult(AdvisoryStatus.FAILED, failed_text)
        return AdvisoryResult(AdvisoryStatus.OK, text)


def _to_data_url(image_bytes: bytes, mime_type: str | None = None) -> str:
    """Convert bytes to a base64 data URL for image input."""
    resolved = mime_type or _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{resolved};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"


def _is_base64_data_url(value: str) -> bool:
    header, separator, payload = value.partition(",")
    return (
        bool(separator)
        and bool(payload)
        and header.startswith("data:image/")
        and header.endswith(";base64")
    )
