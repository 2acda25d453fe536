import os
import sys
import pytest
from PyQt6.QtWidgets import QApplication

from services.configurator_service import ConfiguratorService
from services.data_context import DataContext


@pytest.fixture(scope="session", autouse=True)
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app


@pytest.fixture
def bus():
    return DataContext()


@pytest.fixture
def service(bus):
    return ConfiguratorService(bus=bus)
