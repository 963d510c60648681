import io

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from callsheet.document.data_url import encode_data_url
from callsheet.extraction.models import (
    Contact,
    EmergencyContact,
    ExtractionResult,
    Location,
    ProductionInfo,
)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# 1x1 transparent PNG.
TINY_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

CALL_SHEET_LINES = [
    "SUMMER CAMPAIGN - CALL SHEET",
    "Production: Northlight Pictures   Shoot date: 2024-06-12",
    "DP: Dave O'Neil  555.123.4567  dave@example.com",
    "Gaffer: Maria de la Cruz  (555) 987-6543",
    "Key Grip: Sean McDonald  555-222-3333",
    "Nearest hospital: St. Mary's Medical Center  555-000-1111",
]


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def call_sheet_pdf_bytes() -> bytes:
    """Generate a text-based call sheet PDF well above the text-layer threshold."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in CALL_SHEET_LINES:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()


@pytest.fixture()
def call_sheet_pdf_data_url(call_sheet_pdf_bytes: bytes) -> str:
    return encode_data_url(call_sheet_pdf_bytes, PDF_MIME)


@pytest.fixture()
def call_sheet_docx_bytes() -> bytes:
    document = docx.Document()
    document.add_paragraph(CALL_SHEET_LINES[0])
    document.add_paragraph(CALL_SHEET_LINES[1])
    table = document.add_table(rows=3, cols=3)
    rows = [
        ("Role", "Name", "Phone"),
        ("DP", "Dave O'Neil", "555.123.4567"),
        ("Gaffer", "Maria de la Cruz", "(555) 987-6543"),
    ]
    for row, values in zip(table.rows, rows):
        for cell, value in zip(row.cells, values):
            cell.text = value
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def call_sheet_docx_data_url(call_sheet_docx_bytes: bytes) -> str:
    return encode_data_url(call_sheet_docx_bytes, DOCX_MIME)


@pytest.fixture()
def call_sheet_xlsx_bytes() -> bytes:
    workbook = openpyxl.Workbook()
    crew = workbook.active
    crew.title = "Crew"
    crew.append(["Role", "Name", "Phone", "Email"])
    crew.append(["DP", "Dave O'Neil", "555.123.4567", "dave@example.com"])
    crew.append([None, None, None, None])
    crew.append(["Gaffer", "Maria de la Cruz", "(555) 987-6543", None])
    workbook.create_sheet("Empty")
    locations = workbook.create_sheet("Locations")
    locations.append(["Name", "Address"])
    locations.append(["Studio A", "100 Main St"])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def call_sheet_xlsx_data_url(call_sheet_xlsx_bytes: bytes) -> str:
    return encode_data_url(call_sheet_xlsx_bytes, XLSX_MIME)


@pytest.fixture()
def png_data_url() -> str:
    return f"data:image/png;base64,{TINY_PNG_BASE64}"


@pytest.fixture()
def call_sheet_text() -> str:
    return "\n".join(CALL_SHEET_LINES)


@pytest.fixture()
def raw_extraction() -> ExtractionResult:
    """A messy extraction, as a model would return it, with one duplicate."""
    return ExtractionResult(
        production_info=ProductionInfo(
            title="Summer Campaign",
            production_company="Northlight Pictures",
            shoot_date="2024-06-12",
        ),
        contacts=[
            Contact(
                name="dave o'neil",
                role="DP",
                phone="555.123.4567",
                email=" Dave@Example.com ",
                confidence=0.95,
            ),
            Contact(
                name="Dave O'Neil",
                role="Director of Photography",
                phone="(555) 123-4567",
                notes="Bring light meter",
                confidence=0.9,
            ),
            Contact(name="maria DE LA cruz", role="gaffer", phone="+1 555 987 6543"),
        ],
        emergency_contacts=[
            EmergencyContact(type="Hospital", name="St. Mary's", phone="5550001111"),
        ],
        locations=[Location(name="Studio A", address="100 Main St", phone="555 222 3333")],
    )
