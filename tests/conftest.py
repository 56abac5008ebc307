import json
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from healthbot.settings import Settings
from healthbot.web import create_app


def make_report(**overrides):
    report = {
        "summary": "Likely a viral infection.",
        "possibleCauses": ["Common cold", "Influenza"],
        "riskLevel": "Moderate",
        "precautions": ["Rest", "Drink warm fluids"],
        "safeMedications": ["Paracetamol"],
        "dietPlan": {
            f"day{i}": {"breakfast": "Oats", "lunch": "Dal and rice", "dinner": "Vegetable soup"}
            for i in range(1, 8)
        },
        "nextSteps": ["Consult GP if fever lasts more than 3 days"],
    }
    report.update(overrides)
    return report


@pytest.fixture
def settings():
    return Settings(api_key="test-key")


@pytest.fixture
def mock_generator():
    generator = Mock()
    generator.generate.return_value = json.dumps(make_report())
    return generator


@pytest.fixture
def client(settings, mock_generator):
    return TestClient(create_app(settings, generator=mock_generator))
