import io

import pytest


@pytest.fixture
def make_docx():
    from docx import Document

    def _make(lines, table_rows=()):
        doc = Document()
        for line in lines:
            doc.add_paragraph(line)
        if table_rows:
            table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for r, row in enumerate(table_rows):
                for c, value in enumerate(row):
                    table.cell(r, c).text = value
        buf = io.BytesIO()
        doc.save(buf)
        return buf.getvalue()

    return _make


@pytest.fixture
def make_pdf():
    from reportlab.pdfgen import canvas

    def _make(lines):
        buf = io.BytesIO()
        c = canvas.Canvas(buf)
        y = 800
        for line in lines:
            c.drawString(72, y, line)
            y -= 14
        c.save()
        return buf.getvalue()

    return _make
