from callsheet.config.settings import Settings
from callsheet.document.router import DocumentRouter, build_router
from callsheet.extraction.extractor import ContactExtractor
from callsheet.extraction.factory import ExtractorFactory
from callsheet.logging.logger import Log
from callsheet.normalization.models import NormalizationConfig
from callsheet.normalization.normalizer import ContactNormalizer
from callsheet.pipeline.exceptions import ExtractionFailedError
from callsheet.pipeline.models import ExtractContactsResult
from callsheet.pipeline.pipeline import PipelineContext, PipelineStep
from callsheet.pipeline.steps import ExtractContactsStep, NormalizeStep, RouteDocumentStep


class ExtractionService:
    """Runs a call sheet through route -> extract -> normalize.

    Each call is independent; nothing is shared between requests.
    """

    def __init__(
        self,
        router: DocumentRouter,
        extractor: ContactExtractor,
        normalizer: ContactNormalizer,
    ) -> None:
        self._steps: list[PipelineStep] = [
            RouteDocumentStep(router),
            ExtractContactsStep(extractor),
            NormalizeStep(normalizer),
        ]

    def extract_contacts(
        self,
        content: str,
        mime_hint: str | None = None,
        filename: str = "document",
    ) -> ExtractContactsResult:
        Log.info(f"Starting contact extraction: {filename} (hint={mime_hint}, {len(content)} chars)")
        context = PipelineContext(content=content, filename=filename, mime_hint=mime_hint)
        try:
            for step in self._steps:
                context = step.run(context)
        except ExtractionFailedError as exc:
            Log.error(f"Contact extraction failed for {filename}: {exc}")
            raise

        if (
            context.document is None
            or context.raw_extraction is None
            or context.normalization_result is None
        ):
            raise ExtractionFailedError("Pipeline finished without a result")

        normalization = context.normalization_result
        Log.info(
            f"Extraction and normalization completed for {filename}: "
            f"strategy={context.document.strategy.value}, "
            f"raw={len(context.raw_extraction.contacts)}, "
            f"normalized={len(normalization.data.contacts)}, "
            f"duplicates_removed={normalization.stats.duplicates_removed}, "
            f"issues={len(normalization.issues)}"
        )
        return ExtractContactsResult(
            document=context.document,
            raw=context.raw_extraction,
            normalized=normalization.data,
            stats=normalization.stats,
            issues=normalization.issues,
        )


def normalization_config_from(settings: Settings) -> NormalizationConfig:
    return NormalizationConfig(
        normalize_phones=settings.normalization_normalize_phones,
        normalize_names=settings.normalization_normalize_names,
        normalize_roles=settings.normalization_normalize_roles,
        infer_departments=settings.normalization_infer_departments,
        deduplicate=settings.normalization_deduplicate,
        default_country_code=settings.normalization_default_country_code,
    )


def build_service(settings: Settings) -> ExtractionService:
    """Build an ExtractionService with all adapters configured from settings."""
    return ExtractionService(
        router=build_router(settings),
        extractor=ExtractorFactory.create(settings),
        normalizer=ContactNormalizer(normalization_config_from(settings)),
    )
