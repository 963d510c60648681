from unittest.mock import MagicMock

import pytest

from callsheet.config.settings import Settings
from callsheet.document.models import (
    DocumentMetadata,
    DocumentType,
    ProcessedDocument,
    ProcessingStrategy,
    ProcessorResult,
)
from callsheet.document.router import DocumentRouter
from callsheet.extraction.exceptions import ExtractionNetworkError
from callsheet.extraction.extractor import ContactExtractor
from callsheet.extraction.models import Contact, ExtractionResult
from callsheet.normalization.normalizer import ContactNormalizer
from callsheet.pipeline.exceptions import ExtractionFailedError
from callsheet.pipeline.pipeline import PipelineContext
from callsheet.pipeline.service import ExtractionService, build_service
from callsheet.pipeline.steps import ExtractContactsStep, NormalizeStep

METADATA = DocumentMetadata(original_filename="sheet", mime_type="text/plain", size=40)


def _text_document() -> ProcessedDocument:
    return ProcessedDocument(
        type=DocumentType.TEXT,
        text_content="DP: dave o'neil 555.123.4567",
        metadata=METADATA,
        strategy=ProcessingStrategy.DIRECT_TEXT,
    )


def _vision_document() -> ProcessedDocument:
    return ProcessedDocument(
        type=DocumentType.PDF,
        images=["data:image/png;base64,AAA"],
        metadata=METADATA,
        strategy=ProcessingStrategy.VISION,
    )


def _make_service(
    document: ProcessedDocument | None = None,
) -> tuple[ExtractionService, MagicMock, MagicMock]:
    router = MagicMock(spec=DocumentRouter)
    router.process.return_value = ProcessorResult.ok(document or _text_document())
    extractor = MagicMock(spec=ContactExtractor)
    raw = ExtractionResult(contacts=[Contact(name="dave o'neil", role="DP", phone="555.123.4567")])
    extractor.extract_from_text.return_value = raw
    extractor.extract_from_images.return_value = raw
    service = ExtractionService(router=router, extractor=extractor, normalizer=ContactNormalizer())
    return service, router, extractor


class TestExtractionService:
    def test_text_document_uses_text_extraction(self) -> None:
        service, router, extractor = _make_service()

        result = service.extract_contacts("DP: dave o'neil 555.123.4567", "text/plain", "sheet.txt")

        router.process.assert_called_once_with("DP: dave o'neil 555.123.4567", "sheet.txt", "text/plain")
        extractor.extract_from_text.assert_called_once_with("DP: dave o'neil 555.123.4567")
        extractor.extract_from_images.assert_not_called()
        assert result.document.strategy == ProcessingStrategy.DIRECT_TEXT
        assert result.raw.contacts[0].name == "dave o'neil"
        assert result.normalized.contacts[0].name == "Dave O'Neil"
        assert result.normalized.contacts[0].phone == "(555) 123-4567"
        assert result.stats.names_normalized == 1

    def test_vision_document_uses_image_extraction(self) -> None:
        service, _, extractor = _make_service(_vision_document())

        result = service.extract_contacts("data:application/pdf;base64,AAA", filename="scan.pdf")

        extractor.extract_from_images.assert_called_once_with(["data:image/png;base64,AAA"])
        extractor.extract_from_text.assert_not_called()
        assert result.document.requires_vision is True

    def test_routing_failure_raises(self) -> None:
        service, router, extractor = _make_service()
        router.process.return_value = ProcessorResult.failure(
            "Image too large (25.0MB). Maximum size is 20MB.", "PayloadTooLarge"
        )

        with pytest.raises(ExtractionFailedError, match="Image too large"):
            service.extract_contacts("data:image/png;base64,AAA")

        extractor.extract_from_text.assert_not_called()
        extractor.extract_from_images.assert_not_called()

    def test_extraction_errors_propagate(self) -> None:
        service, _, extractor = _make_service()
        extractor.extract_from_text.side_effect = ExtractionNetworkError("down")

        with pytest.raises(ExtractionNetworkError):
            service.extract_contacts("some call sheet text")

    def test_to_dict(self) -> None:
        service, _, _ = _make_service()

        payload = service.extract_contacts("DP: dave o'neil 555.123.4567").to_dict()

        assert payload["document"]["strategy"] == "direct-text"
        assert payload["raw"]["contacts"][0]["name"] == "dave o'neil"
        assert payload["normalized"]["contacts"][0]["name"] == "Dave O'Neil"
        assert payload["stats"]["total_contacts"] == 1
        assert payload["issues"] == []


class TestPipelineSteps:
    def test_extract_step_requires_document(self) -> None:
        step = ExtractContactsStep(MagicMock(spec=ContactExtractor))
        with pytest.raises(ValueError, match="document must be set"):
            step.run(PipelineContext(content="x", filename="f"))

    def test_normalize_step_requires_raw_extraction(self) -> None:
        step = NormalizeStep(ContactNormalizer())
        with pytest.raises(ValueError, match="raw_extraction must be set"):
            step.run(PipelineContext(content="x", filename="f"))


class TestBuildService:
    def test_builds_with_example_provider(self) -> None:
        service = build_service(Settings(extraction_provider="example"))

        result = service.extract_contacts("Call sheet with no crew listed yet.")

        assert result.normalized.contacts == []
        assert result.issues[0].field == "contacts"
