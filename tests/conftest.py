"""Shared fixtures for Table Toolkit tests.

Documents are small lxml trees built from XML literals so assertions can
address elements by id.
"""

import logging
import sys
from pathlib import Path

import pytest
from lxml import etree as ET

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from table_toolkit.config import ConfigManager
from table_toolkit.core.editor import Editor
from table_toolkit.core.models import DocumentModel

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

DOCUMENT_XML = """
<root>
  <paragraph id="intro">Intro</paragraph>
  <table id="t1" borderStyle="solid" width="50px">
    <tableRow id="t1-row">
      <tableCell id="t1-cell">
        <paragraph id="t1-p">A1</paragraph>
      </tableCell>
    </tableRow>
  </table>
  <table id="t2">
    <tableRow>
      <tableCell id="t2-cell">
        <table id="nested">
          <tableRow>
            <tableCell>
              <paragraph id="nested-p">N</paragraph>
            </tableCell>
          </tableRow>
        </table>
      </tableCell>
    </tableRow>
  </table>
</root>
"""


@pytest.fixture
def document_root():
    """Fresh document tree for every test."""
    parser = ET.XMLParser(remove_blank_text=True)
    return ET.fromstring(DOCUMENT_XML.strip(), parser)


@pytest.fixture
def by_id(document_root):
    """Return a lookup ``id -> element`` over the document fixture."""
    def finder(element_id: str):
        found = document_root.xpath(f"//*[@id='{element_id}']")
        assert found, f"no element with id {element_id!r}"
        return found[0]
    return finder


@pytest.fixture
def editor_config():
    return {
        "undo": {"max_history": 50},
        "table": {"element_type": "table", "default_unit": "px"},
    }


@pytest.fixture
def editor(document_root, editor_config):
    ed = Editor(document_root, config=editor_config)
    yield ed
    ed.destroy()


@pytest.fixture
def model(document_root):
    return DocumentModel(document_root)


@pytest.fixture
def select(editor):
    """Collapse the editor selection inside the element with the given id."""
    def selector(element_id: str, offset: int = 0):
        element = editor.model.document.root.xpath(f"//*[@id='{element_id}']")[0]
        editor.model.document.selection.set_to(element, offset)
        return element
    return selector


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset the ConfigManager singleton between tests."""
    yield
    ConfigManager.reset()
