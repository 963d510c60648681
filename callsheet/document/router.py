"""Document router: picks exactly one format adapter per input."""

from enum import Enum

from callsheet.config.settings import Settings
from callsheet.document.adapters.base import BaseDocumentAdapter
from callsheet.document.adapters.excel_adapter import ExcelAdapter
from callsheet.document.adapters.image_adapter import ImageAdapter
from callsheet.document.adapters.pdf_adapter import PdfAdapter
from callsheet.document.adapters.text_adapter import TextAdapter
from callsheet.document.adapters.word_adapter import WordAdapter
from callsheet.document.exceptions import NoProcessorFoundError
from callsheet.document.models import DocumentType, ProcessorResult
from callsheet.document.pdf.base import BasePdfTextExtractor
from callsheet.document.pdf.pdfplumber_adapter import PdfPlumberAdapter
from callsheet.document.pdf.pymupdf_adapter import PyMuPdfAdapter
from callsheet.logging.logger import Log


class AdapterKind(str, Enum):
    PDF = "pdf"
    WORD = "word"
    EXCEL = "excel"
    IMAGE = "image"
    TEXT = "text"


# Most specific first; TEXT is the catch-all and must stay last.
ADAPTER_ORDER: tuple[AdapterKind, ...] = (
    AdapterKind.PDF,
    AdapterKind.WORD,
    AdapterKind.EXCEL,
    AdapterKind.IMAGE,
    AdapterKind.TEXT,
)

SUPPORTED_FORMATS_MESSAGE = (
    "Unsupported document format. Supported formats: PDF, Word (.docx), "
    "Excel (.xlsx), PNG, JPG, GIF, WebP, plain text."
)

PDF_TEXT_ENGINES: dict[str, type[BasePdfTextExtractor]] = {
    "pdfplumber": PdfPlumberAdapter,
    "pymupdf": PyMuPdfAdapter,
}


def detect_type(content: str, mime_hint: str | None = None) -> DocumentType:
    """Classify content by its data URL marker, falling back to the hint."""
    if content.startswith("data:application/pdf") or mime_hint == "application/pdf":
        return DocumentType.PDF
    if content.startswith("data:image/") or (mime_hint or "").startswith("image/"):
        return DocumentType.IMAGE
    if (
        content.startswith("data:text/")
        or (mime_hint or "").startswith("text/")
        or not content.startswith("data:")
    ):
        return DocumentType.TEXT
    return DocumentType.UNKNOWN


class DocumentRouter:
    """Dispatches content to the first adapter in ADAPTER_ORDER that claims it.

    The adapter set is closed: one adapter per AdapterKind. A claiming
    adapter's result is returned as is, failures included; later adapters
    are never consulted.
    """

    def __init__(
        self,
        *,
        pdf: PdfAdapter | None = None,
        word: WordAdapter | None = None,
        excel: ExcelAdapter | None = None,
        image: ImageAdapter | None = None,
        text: TextAdapter | None = None,
    ) -> None:
        self._adapters: dict[AdapterKind, BaseDocumentAdapter] = {
            AdapterKind.PDF: pdf or PdfAdapter(),
            AdapterKind.WORD: word or WordAdapter(),
            AdapterKind.EXCEL: excel or ExcelAdapter(),
            AdapterKind.IMAGE: image or ImageAdapter(),
            AdapterKind.TEXT: text or TextAdapter(),
        }

    def select(self, content: str, mime_hint: str | None = None) -> AdapterKind | None:
        for kind in ADAPTER_ORDER:
            if self._adapters[kind].can_process(content, mime_hint):
                return kind
        return None

    def process(
        self,
        content: str,
        filename: str,
        mime_hint: str | None = None,
    ) -> ProcessorResult:
        detected = detect_type(content, mime_hint)
        Log.info(
            f"Processing document {filename}: detected={detected.value}, "
            f"hint={mime_hint}, length={len(content)}"
        )

        kind = self.select(content, mime_hint)
        if kind is None:
            Log.error(
                f"No processor found for document {filename} "
                f"(detected={detected.value}, hint={mime_hint})"
            )
            return ProcessorResult.failure(SUPPORTED_FORMATS_MESSAGE, NoProcessorFoundError.kind)

        result = self._adapters[kind].process(content, filename)
        if result.success and result.document is not None:
            Log.info(
                f"Document {filename} processed by {kind.value} adapter: "
                f"strategy={result.document.strategy.value}, "
                f"requires_vision={result.document.requires_vision}"
            )
        else:
            Log.warning(f"Document {filename} processing failed: {result.error}")
        return result


def build_router(settings: Settings) -> DocumentRouter:
    """Build a DocumentRouter using the configured PDF text engine."""
    engine = settings.pdf_engine.lower()
    extractor_cls = PDF_TEXT_ENGINES.get(engine)
    if extractor_cls is None:
        raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {list(PDF_TEXT_ENGINES)}")
    text_extractor = extractor_cls()
    return DocumentRouter(pdf=PdfAdapter(text_extractor=text_extractor))
