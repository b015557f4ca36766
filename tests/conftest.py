"""Pytest configuration and shared fixtures."""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tableish.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Rebuild configuration from the environment for every test."""
    reset_config()
    yield
    reset_config()


# ============================================================================
# HTML Fixtures
# ============================================================================

@pytest.fixture
def tools_html():
    """Plain table, header row plus two data rows."""
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Tools</title></head>
    <body>
        <table id="tools">
            <tr>
                <th>tool</th>
                <th>dude</th>
            </tr>
            <tr>
                <td>webrat</td>
                <td>bryan</td>
            </tr>
            <tr>
                <td>cucumber</td>
                <td>aslak</td>
            </tr>
        </table>
    </body>
    </html>
    """


@pytest.fixture
def tools_dl_html():
    """Definition list with one <dd> per <dt>."""
    return """
    <html>
    <body>
        <dl id="tools">
            <dt>webrat</dt>
            <dd>bryan</dd>
            <dt>cucumber</dt>
            <dd>aslak</dd>
        </dl>
    </body>
    </html>
    """


@pytest.fixture
def colspan_html():
    """Header cell spanning two columns."""
    return """
    <table id="people">
        <tr><th colspan="2">Name</th></tr>
        <tr><td>Ada</td><td>Lovelace</td></tr>
    </table>
    """


@pytest.fixture
def rowspan_html():
    """First column spans two rows."""
    return """
    <table id="tools">
        <tr><td rowspan="2">Cucumber</td><td>aslak</td></tr>
        <tr><td>joseph</td></tr>
        <tr><td>Webrat</td><td>bryan</td></tr>
    </table>
    """


@pytest.fixture
def mixed_span_html():
    """Row and column spans together, like a schedule grid."""
    return """
    <table id="schedule">
        <thead>
            <tr>
                <th rowspan="2">Day</th>
                <th colspan="2">Morning</th>
                <th colspan="2">Afternoon</th>
            </tr>
            <tr>
                <th>9:00</th><th>11:00</th><th>14:00</th><th>16:00</th>
            </tr>
        </thead>
        <tbody>
            <tr>
                <td>Monday</td>
                <td colspan="2">Workshop</td>
                <td>Review</td>
                <td rowspan="2">Office hours</td>
            </tr>
            <tr>
                <td>Tuesday</td>
                <td>Standup</td>
                <td>Pairing</td>
                <td>Demo</td>
            </tr>
        </tbody>
    </table>
    """


@pytest.fixture
def ragged_html():
    """Rows with differing numbers of cells."""
    return """
    <table id="ragged">
        <tr><td>a</td><td>b</td><td>c</td></tr>
        <tr><td>d</td></tr>
        <tr></tr>
        <tr><td>e</td><td>f</td></tr>
    </table>
    """


@pytest.fixture
def malformed_span_html():
    """Span attributes that are not positive integers."""
    return """
    <table id="broken">
        <tr><td colspan="abc">one</td><td rowspan="">two</td></tr>
        <tr><td colspan="0">three</td><td rowspan="-2">four</td></tr>
    </table>
    """


@pytest.fixture
def empty_html():
    """Empty/minimal HTML."""
    return "<html><body></body></html>"
