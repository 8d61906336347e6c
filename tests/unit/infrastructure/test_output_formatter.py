import json

import pytest

from impact_calc.application.services.locations import LocationCatalog
from impact_calc.application.services.timeline import build_timeline
from impact_calc.application.simulation import estimate_quick_impact, simulate_impact
from impact_calc.domain.models.impact import ImpactSimulationInput
from impact_calc.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
    format_number,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (1.5e9, "1.50B"),
        (2e6, "2.00M"),
        (3250, "3.25k"),
        (-2500, "-2.50k"),
        (12.5, "12.50"),
        (0.001, "1.00e-03"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.fixture
def ocean_case():
    params = ImpactSimulationInput.from_slider(200, 20, 45, "ocean")
    return {
        "result": simulate_impact(params),
        "params": params,
        "quick": estimate_quick_impact(200, 20, 45),
        "location": LocationCatalog().get_preset("Pacific Ocean"),
        "timeline": build_timeline(20, 5),
    }


def test_json_output(ocean_case):
    data = json.loads(JSONOutputFormatter().format_result(**ocean_case))

    result = data["simulation_result"]
    assert result["tsunami_potential"] is True
    assert result["seismic_severity"] == "extreme"
    assert result["attenuation_factor"] == round(ocean_case["result"].attenuation_factor, 4)
    assert data["input"]["velocity"] == 20000
    assert data["location"] == {
        "name": "Pacific Ocean",
        "lat": 0.0,
        "lon": -140.0,
        "terrain": "ocean",
    }
    assert data["quick_estimate"]["tsunami_risk"] == "HIGH"
    assert [m["status"] for m in data["timeline"]["milestones"]] == [
        "completed",
        "completed",
        "active",
        "pending",
        "critical",
    ]


def test_json_output_result_only(ocean_case):
    data = json.loads(JSONOutputFormatter().format_result(ocean_case["result"]))
    assert list(data) == ["simulation_result"]


def test_console_output(ocean_case, capsys):
    ConsoleOutputFormatter().format_result(**ocean_case)

    out = capsys.readouterr().out
    assert "Pacific Ocean: 0.0000°, -140.0000°" in out
    assert "Tsunami Potential:       yes" in out
    assert "Potential large tsunami generation" in out
    assert "Danger Level:            SEVERE" in out
    assert "T-0" in out
