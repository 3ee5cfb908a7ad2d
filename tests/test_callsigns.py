from flightpulse.ingestion.callsigns import resolve_airline, resolve_origin_hub


def test_known_prefix_resolves_airline():
    assert resolve_airline('BAW123') == 'British Airways'
    assert resolve_airline('ezy45ab') == 'easyJet'


def test_empty_callsign_is_unknown():
    assert resolve_airline('') == 'Unknown'
    assert resolve_airline(None) == 'Unknown'
    assert resolve_airline('   ') == 'Unknown'


def test_unknown_prefix_uses_first_two_characters():
    assert resolve_airline('ZZZ999') == 'ZZ'


def test_origin_hub_lookup():
    assert resolve_origin_hub('RYR882') == 'STN'
    assert resolve_origin_hub('LOG12') == 'EDI'


def test_origin_hub_defaults():
    assert resolve_origin_hub('ZZZ999') == 'LHR'
    assert resolve_origin_hub(None) == 'LHR'
    assert resolve_origin_hub('ZZZ999', default_hub='MAN') == 'MAN'
