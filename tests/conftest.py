"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from page_builder.canvas.controller import CanvasController
from page_builder.canvas.palette import Palette
from page_builder.canvas.property_editor import PropertyEditor
from page_builder.models.canvas_models import ElementType
from page_builder.server import app


@pytest.fixture
def palette():
    return Palette()


@pytest.fixture
def controller():
    return CanvasController()


@pytest.fixture
def editor(controller):
    return PropertyEditor(controller)


@pytest.fixture
def four_elements(controller, palette):
    """Canvas holding Text, Image, Div, List in that order."""
    for kind in (ElementType.TEXT, ElementType.IMAGE, ElementType.DIV, ElementType.LIST):
        controller.drop(palette.drag_start(kind))
    return controller


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_id(client):
    response = client.post("/api/canvas/session")
    assert response.status_code == 200
    return response.json()["session_id"]
