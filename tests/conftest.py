"""Test configuration and fixtures for Word Html Toolkit tests.

Provides isolated configuration/log folders for every test and small
builders that create real DOCX files with python-docx, including list
numbering definitions.
"""

import logging
import sys
import zipfile
from pathlib import Path
from typing import Optional

import pytest
from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordhtml.config import ConfigManager

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user config and log folders at the test's temp dir."""
    config_dir = tmp_path / "user_config"
    config_dir.mkdir()
    monkeypatch.setenv("WORDHTML_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("WORDHTML_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("WORDHTML_DEBUG_MODULES", raising=False)
    ConfigManager.reset()
    yield config_dir
    ConfigManager.reset()


# ---------------------------------------------------------------------------
# DOCX builders
# ---------------------------------------------------------------------------

def new_document():
    """Return a python-docx document whose body holds no paragraphs or tables."""
    doc = Document()
    body = doc.element.body
    for child in list(body.iterchildren()):
        if child.tag in (qn("w:p"), qn("w:tbl")):
            body.remove(child)
    return doc


def add_list_definition(doc, multilevel_type: Optional[str]) -> int:
    """Add an abstractNum (with the given multiLevelType) plus a num; return the numId."""
    numbering = doc.part.numbering_part.element

    abstract_ids = [int(a.get(qn("w:abstractNumId"))) for a in numbering.findall(qn("w:abstractNum"))]
    abstract_id = max(abstract_ids, default=-1) + 1
    abstract = OxmlElement("w:abstractNum")
    abstract.set(qn("w:abstractNumId"), str(abstract_id))
    if multilevel_type is not None:
        ml_type = OxmlElement("w:multiLevelType")
        ml_type.set(qn("w:val"), multilevel_type)
        abstract.append(ml_type)
    numbering.insert(0, abstract)

    num_ids = [int(n.get(qn("w:numId"))) for n in numbering.findall(qn("w:num"))]
    num_id = max(num_ids, default=0) + 1
    num = OxmlElement("w:num")
    num.set(qn("w:numId"), str(num_id))
    abstract_ref = OxmlElement("w:abstractNumId")
    abstract_ref.set(qn("w:val"), str(abstract_id))
    num.append(abstract_ref)
    numbering.append(num)
    return num_id


def add_list_paragraph(doc, text: str, num_id: Optional[int], ilvl: int = 0):
    """Add a paragraph carrying ``w:numPr``; *num_id* None omits ``w:numId``."""
    paragraph = doc.add_paragraph(text)
    num_pr = paragraph._p.get_or_add_pPr().get_or_add_numPr()
    num_pr.get_or_add_ilvl().val = ilvl
    if num_id is not None:
        num_pr.get_or_add_numId().val = num_id
    return paragraph


def add_styled_paragraph(doc, text: str, style_id: str):
    """Add a paragraph whose ``w:pStyle`` is set to *style_id* verbatim."""
    paragraph = doc.add_paragraph(text)
    paragraph._p.style = style_id
    return paragraph


@pytest.fixture
def docx_factory(tmp_path):
    """Save a document built by a callback and return its path."""

    def _make(build, name: str = "sample.docx") -> Path:
        doc = new_document()
        build(doc)
        path = tmp_path / name
        doc.save(str(path))
        return path

    return _make


@pytest.fixture
def sample_docx(docx_factory):
    """Heading, paragraph, bullet list, numbered list and a 2x2 table."""

    def build(doc):
        bullets = add_list_definition(doc, "hybridMultilevel")
        numbers = add_list_definition(doc, "multilevel")
        doc.add_heading("Intro", level=1)
        doc.add_paragraph("Plain text")
        add_list_paragraph(doc, "apple", bullets)
        add_list_paragraph(doc, "pear", bullets)
        add_list_paragraph(doc, "first", numbers)
        table = doc.add_table(rows=2, cols=2)
        for r in range(2):
            for c in range(2):
                table.cell(r, c).text = f"r{r}c{c}"

    return docx_factory(build)


@pytest.fixture
def bodyless_docx(docx_factory, tmp_path):
    """A valid package whose main part is a bare ``w:document`` without ``w:body``."""
    source = docx_factory(lambda doc: doc.add_paragraph("gone"), name="source.docx")
    path = tmp_path / "bodyless.docx"
    with zipfile.ZipFile(source) as src, zipfile.ZipFile(path, "w") as dst:
        for item in src.infolist():
            data = src.read(item.filename)
            if item.filename == "word/document.xml":
                data = b'<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"/>'
            dst.writestr(item, data)
    return path
