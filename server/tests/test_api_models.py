import pytest
from pydantic import ValidationError

from server.models import AddSlideRequest, CreateSessionRequest, SurfaceEvent, ThemeSummary

def test_theme_summary_model():
    summary = ThemeSummary(id="startup-pitch", name="Startup Pitch")
    assert summary.free is False
    assert summary.description == ""

def test_request_defaults():
    assert CreateSessionRequest().theme_id is None
    assert AddSlideRequest().slide_type == "bullets"

def test_surface_event_model():
    event = SurfaceEvent.model_validate({"event": "input", "slide_index": 1, "field": "title", "text": "Hi"})
    assert event.slide_index == 1
    assert event.args == {}

def test_surface_event_rejects_unknown_event():
    with pytest.raises(ValidationError):
        SurfaceEvent.model_validate({"event": "scroll"})
