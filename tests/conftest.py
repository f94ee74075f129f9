# Headless Qt for view tests; the sort services themselves never touch Qt.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="module")
def qapp():  # pragma: no cover - infrastructure
    QApplication = pytest.importorskip("PyQt6.QtWidgets").QApplication
    return QApplication.instance() or QApplication(sys.argv)  # type: ignore
