import pytest

from campuslife.locations import match_facility_building, resolve_building


@pytest.mark.parametrize(
    "text, building_id",
    [
        ("Seminarraum (1901.02.201)", "bildungscampus"),
        ("Raum (1902.01.001)", "bildungscampus"),
        ("Hörsaal (1910.EG.050C)", "weipertstrasse"),
        ("Labor (1915.03.12)", "weipertstrasse"),
    ],
)
def test_bracketed_facility_codes(text, building_id):
    assert match_facility_building(text).id == building_id


@pytest.mark.parametrize("text", ["", None, "Raum 1910.EG.050", "(1999.01.01)", "(0505.11)"])
def test_unknown_or_unbracketed_codes(text):
    assert match_facility_building(text) is None


def test_first_known_code_wins():
    assert match_facility_building("(1999.1) oder (1915.2) oder (1901.3)").id == "weipertstrasse"


def test_facility_path_is_separate_from_room_code_rules():
    # a leading room code never consults bracketed codes and vice versa
    text = "C.0.50, Hörsaal (1901.02.201)"
    assert resolve_building("C.0.50").id == "weipertstrasse"
    assert match_facility_building(text).id == "bildungscampus"
