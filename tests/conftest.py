import pytest

from data_loader import normalize_records


def four_band_row(name, total_percent, total_ha, high, moderate, low, unburned, color="#888888"):
    """Raw text row in the four-band schema; hectares derived from the percents."""
    return {
        "vegetation_classification": name,
        "total_percent": str(total_percent),
        "total_ha": str(total_ha),
        "high_percent": str(high),
        "moderate_percent": str(moderate),
        "low_percent": str(low),
        "unburned_percent": str(unburned),
        "high_ha": str(total_ha * high / 100),
        "moderate_ha": str(total_ha * moderate / 100),
        "low_ha": str(total_ha * low / 100),
        "unburned_ha": str(total_ha * unburned / 100),
        "color": color,
    }


@pytest.fixture
def scenario_rows():
    return [
        four_band_row("A", 60, 600, 70, 20, 10, 0, color="#1b5e20"),
        four_band_row("B", 40, 400, 10, 10, 10, 70, color="#f9a825"),
    ]


@pytest.fixture
def scenario_records(scenario_rows):
    return normalize_records(scenario_rows)


@pytest.fixture
def three_band_rows():
    return [
        {
            "species": "Chaparral",
            "total_percent": "75",
            "total_ha": "750",
            "high_percent": "50",
            "medium_percent": "30",
            "low_percent": "20",
            "high_ha": "375",
            "medium_ha": "225",
            "low_ha": "150",
            "color": "#8d6e63",
        },
        {
            "species": "Grassland",
            "total_percent": "25",
            "total_ha": "250",
            "high_percent": "",
            "medium_percent": "40",
            "low_percent": "60",
            "high_ha": "",
            "medium_ha": "100",
            "low_ha": "150",
            "color": "#fdd835",
        },
    ]
