from callsheet.document.router import DocumentRouter
from callsheet.extraction.extractor import ContactExtractor
from callsheet.logging.logger import Log
from callsheet.normalization.normalizer import ContactNormalizer
from callsheet.pipeline.exceptions import ExtractionFailedError
from callsheet.pipeline.pipeline import PipelineContext, PipelineStep


class RouteDocumentStep(PipelineStep):
    def __init__(self, router: DocumentRouter) -> None:
        self._router = router

    def run(self, context: PipelineContext) -> PipelineContext:
        result = self._router.process(context.content, context.filename, context.mime_hint)
        if not result.success or result.document is None:
            raise ExtractionFailedError(result.error or "Document processing failed")
        context.document = result.document
        return context


class ExtractContactsStep(PipelineStep):
    def __init__(self, extractor: ContactExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        if document is None:
            raise ValueError("PipelineContext.document must be set before extraction")

        if document.requires_vision and document.images:
            Log.info(
                f"Using vision-based extraction: {len(document.images)} images "
                f"({document.strategy.value})"
            )
            context.raw_extraction = self._extractor.extract_from_images(document.images)
        elif document.text_content:
            Log.info(
                f"Using text-based extraction: {len(document.text_content)} chars "
                f"({document.strategy.value})"
            )
            context.raw_extraction = self._extractor.extract_from_text(document.text_content)
        else:
            raise ExtractionFailedError("Document has no extractable content")
        return context


class NormalizeStep(PipelineStep):
    def __init__(self, normalizer: ContactNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.raw_extraction is None:
            raise ValueError("PipelineContext.raw_extraction must be set before normalization")
        context.normalization_result = self._normalizer.normalize(context.raw_extraction)
        return context
