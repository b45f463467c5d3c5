import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def _render_pdf(*lines: str) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    y = 780
    for line in lines:
        c.drawString(72, y, line)
        y -= 18
    c.save()
    return buf.getvalue()


@pytest.fixture()
def id_proof_pdf() -> bytes:
    """A single-page identity proof scan."""
    return _render_pdf("Government of India", "Aadhaar: XXXX XXXX 1234", "Name: Test Citizen")


@pytest.fixture()
def income_certificate_pdf() -> bytes:
    """A single-page income certificate."""
    return _render_pdf("Income Certificate", "Annual income: 84,000 INR", "Issued by: Tehsildar")
