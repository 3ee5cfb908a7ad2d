from flightpulse.ingestion.units import meters_to_feet, mps_to_fpm, mps_to_knots


def test_cruise_altitude_in_feet():
    assert meters_to_feet(11000) == 36089


def test_cruise_speed_in_knots():
    assert mps_to_knots(262) == 509


def test_vertical_rate_keeps_sign():
    assert mps_to_fpm(5.08) == 1000
    assert mps_to_fpm(-5.08) == -1000


def test_missing_values_count_as_zero():
    assert meters_to_feet(None) == 0
    assert mps_to_knots(None) == 0
    assert mps_to_fpm(None) == 0


def test_negative_values_round_to_nearest():
    assert meters_to_feet(-10) == -33
    assert mps_to_fpm(-2.54) == -500
