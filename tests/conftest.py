import os

import pytest

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), "fileformats", "samples")

TCX_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2">
  <Activities>
    <Activity Sport="{sport}">
      <Id>{activity_id}</Id>
      <Lap StartTime="{activity_id}">{lap_body}</Lap>
    </Activity>
  </Activities>
</TrainingCenterDatabase>
"""

DEFAULT_LAP_BODY = "<TotalTimeSeconds>3600.0</TotalTimeSeconds><Track></Track>"


def build_tcx(lap_body=DEFAULT_LAP_BODY, sport="Running", activity_id="2023-05-01T10:00:00Z"):
    """Return a small TCX document as a string."""
    return TCX_TEMPLATE.format(sport=sport, activity_id=activity_id, lap_body=lap_body)


@pytest.fixture
def sample_tcx_path():
    return os.path.join(SAMPLES_DIR, "sample.tcx")


@pytest.fixture
def tcx_builder():
    return build_tcx


@pytest.fixture(autouse=True)
def clean_tcxkit_env(monkeypatch):
    """Keep TCXKIT_* settings from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("TCXKIT_"):
            monkeypatch.delenv(name, raising=False)
