import pytest

from callsheet.document.pdf.exceptions import PdfTextExtractionError
from callsheet.document.pdf.pdfplumber_adapter import PdfPlumberAdapter
from callsheet.document.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfPlumberAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(sample_pdf_bytes)
        assert "Hello PDF World" in result.text
        assert result.page_count == 1

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(multi_page_pdf_bytes)
        assert "Page one content" in result.text
        assert "Page two content" in result.text
        assert result.page_count == 2

    def test_extract_empty_pdf_returns_empty_text(self, empty_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(empty_pdf_bytes)
        assert result.text == ""
        assert result.page_count == 1

    def test_extract_raises_on_invalid_bytes(self) -> None:
        adapter = PdfPlumberAdapter()
        with pytest.raises(PdfTextExtractionError):
            adapter.extract(b"not a pdf")

    def test_extract_result_is_stripped(self, sample_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(sample_pdf_bytes)
        assert result.text == result.text.strip()


class TestPyMuPdfAdapter:
    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        adapter = PyMuPdfAdapter()
        result = adapter.extract(multi_page_pdf_bytes)
        assert "Page one content" in result.text
        assert "Page two content" in result.text
        assert result.page_count == 2

    def test_extract_raises_on_invalid_bytes(self) -> None:
        adapter = PyMuPdfAdapter()
        with pytest.raises(PdfTextExtractionError, match="pymupdf"):
            adapter.extract(b"not a pdf")
