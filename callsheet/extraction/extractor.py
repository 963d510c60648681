"""AI-powered contact extraction from call sheet text or page images."""

import json
import time
from collections.abc import Callable
from pathlib import Path

from callsheet.extraction.client_base import BaseExtractionClient, UserContent
from callsheet.extraction.exceptions import ExtractionError, ExtractionNetworkError
from callsheet.extraction.models import ExtractionResult
from callsheet.extraction.parser import parse_extraction
from callsheet.extraction.prompt_loader import load_json_schema, load_prompt
from callsheet.logging.logger import Log


class ContactExtractor:
    """Extracts call sheet entities with an AI provider.

    Transient provider failures (``ExtractionNetworkError``) are retried with
    exponential backoff; everything else fails on the first attempt.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.1,
        max_retries: int = 3,
        base_delay_seconds: float = 1.0,
        prompt_dir: Path | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_retries = max(1, max_retries)
        self._base_delay_seconds = base_delay_seconds
        self._sleep = sleep

        schema_str = load_json_schema(prompt_dir / "extraction_schema.json" if prompt_dir else None)
        self._json_schema = json.loads(schema_str)
        self._system_prompt = load_prompt("extraction_system_prompt.txt", prompt_dir).format(
            json_schema=schema_str,
        )
        self._text_template = load_prompt("extraction_text_prompt.txt", prompt_dir)
        self._vision_prompt = load_prompt("extraction_vision_prompt.txt", prompt_dir).strip()

    def extract_from_text(self, text: str) -> ExtractionResult:
        Log.info(f"Starting text-based extraction: {len(text)} chars")
        prompt = self._text_template.format(content=text)
        return self._extract(prompt, "Text")

    def extract_from_images(self, images: list[str]) -> ExtractionResult:
        """Extract from ``data:image/...`` URLs, one content part per page."""
        if not images:
            raise ExtractionError("No images to extract from")
        Log.info(f"Starting vision-based extraction: {len(images)} images")
        content: list[dict[str, object]] = [
            {"type": "image_url", "image_url": {"url": image, "detail": "high"}}
            for image in images
        ]
        content.append({"type": "text", "text": self._vision_prompt})
        return self._extract(content, "Vision")

    def _extract(self, user_content: UserContent, mode: str) -> ExtractionResult:
        raw = self._call_with_retry(user_content, mode)
        Log.debug(f"AI raw response:\n{raw}")
        result = parse_extraction(self._parse_json(raw))
        Log.info(
            f"{mode} extraction completed: {len(result.contacts)} contacts, "
            f"{len(result.emergency_contacts)} emergency contacts, "
            f"{len(result.locations)} locations"
        )
        return result

    def _call_with_retry(self, user_content: UserContent, mode: str) -> str:
        for attempt in range(1, self._max_retries + 1):
            try:
                return self._client.create_chat_completion(
                    model=self._model,
                    temperature=self._temperature,
                    system_prompt=self._system_prompt,
                    user_content=user_content,
                    json_schema=self._json_schema,
                )
            except ExtractionNetworkError as exc:
                if attempt == self._max_retries:
                    Log.error(f"{mode} extraction failed after {attempt} attempts: {exc}")
                    raise
                delay = self._base_delay_seconds * 2 ** (attempt - 1)
                Log.warning(
                    f"{mode} extraction request failed (attempt {attempt}), "
                    f"retrying in {delay:.1f}s: {exc}"
                )
                self._sleep(delay)
        raise ExtractionError(f"{mode} extraction failed")

    @staticmethod
    def _parse_json(raw: str) -> object:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"Invalid JSON response: {exc}") from exc
